# file: _testutils.py

from functools import partial

import pytest  # pyright: ignore [reportUnusedImport]
from hypothesis import assume, example, given  # pyright: ignore [reportUnusedImport]
from hypothesis import strategies as st


st_scale = partial(st.floats, min_value=0.05, max_value=20.0, allow_nan=False, allow_infinity=False)
st_scroll = partial(st.floats, min_value=-10.0, max_value=10.0, allow_nan=False, allow_infinity=False)
st_pixel = partial(st.floats, min_value=0.0, max_value=1920.0, allow_nan=False, allow_infinity=False, allow_subnormal=False)
st_world = partial(st.floats, min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False)

st_tuples_pixel = partial(st.tuples, st_pixel(), st_pixel())
st_tuples_world = partial(st.tuples, st_world(), st_world())
st_viewport_size = partial(st.tuples, st.integers(64, 3840), st.integers(64, 2160))

