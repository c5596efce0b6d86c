from .joystick import Joystick, JoystickSnapshot
from .scene import RotationController, FlashlightController
from .utils import get_logger, load_config


class Orchestrator:
    def __init__(self, configs=None, joystick=None):
        configs = configs if configs is not None else load_config()
        self._logger = get_logger("Orchestrator", configs.orchestrator.verbose)
        self.joystick = joystick if joystick is not None else Joystick(configs.serial)
        self.rotation = RotationController(configs.scene)
        self.flashlight = FlashlightController(configs.scene)
        self.scene_enabled = configs.scene.enable
        self.echo_light = configs.orchestrator.echo_light
        self.polling_period = configs.orchestrator.polling_period

    def connect(self):
        return self.joystick.connect()

    def disconnect(self):
        self.joystick.disconnect()

    def loop(self) -> JoystickSnapshot:
        snapshot = self.joystick.tick()
        if not self.scene_enabled:
            return snapshot

        if self.rotation.update(snapshot.state, snapshot.samples):
            self._logger.info("Light toggled %s", "on" if self.rotation.light_on else "off")
            if self.echo_light:
                # goes out on the next tick's flush
                self.joystick.send("LED {0}", int(self.rotation.light_on))
        self.flashlight.update(snapshot.state)
        return snapshot
