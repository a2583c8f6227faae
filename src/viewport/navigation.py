# file: navigation.py

"""Per-tick composition of the navigation controllers."""

from viewport.camera import CameraState
from viewport.drag import DragController
from viewport.input import InputSample
from viewport.keypan import KeyPanController
from viewport.prelude import UserConfig
from viewport.zoom import ZoomController


class Navigator:
    """Runs the navigation controllers once per tick against one camera.

    Order is fixed: zoom, then key pan, then drag. Zoom only touches the scale
    and the pans only touch the translation, but drag reads the scale, so the
    drag of a tick always uses that tick's zoom.
    """

    def __init__(
        self,
        zoom: ZoomController | None = None,
        keypan: KeyPanController | None = None,
        drag: DragController | None = None,
    ) -> None:
        self.zoom = zoom if zoom is not None else ZoomController()
        self.keypan = keypan if keypan is not None else KeyPanController()
        self.drag = drag if drag is not None else DragController()

    @classmethod
    def from_config(cls, config: UserConfig) -> "Navigator":
        return cls(
            zoom=ZoomController(config.scroll_sensitivity, config.min_scale, config.max_scale),
            keypan=KeyPanController(config.pan_step),
        )

    def tick(self, camera: CameraState, sample: InputSample) -> None:
        self.zoom.update(camera, sample.scroll_y)
        self.keypan.update(camera, sample.keys)
        self.drag.update(
            camera,
            sample.cursor_pos,
            pressed=sample.button_pressed,
            held=sample.button_held,
            released=sample.button_released,
        )
