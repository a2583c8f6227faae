import cProfile
import pstats

import viewport.prelude as pre
from viewer import Viewer


iscprofile: bool = False
iscprofile = pre.DEBUG_VIEWER_CPROFILE


def main():
    """Main entry point"""

    pre.setup_logging()
    viewer = Viewer()
    viewer.run()


if __name__ == "__main__":
    if iscprofile:
        cProfile.run("main()", "cProfile_main", sort="cumulative")
        p = pstats.Stats("cProfile_main")
        p.strip_dirs().sort_stats("cumulative").print_stats()
    else:
        main()
