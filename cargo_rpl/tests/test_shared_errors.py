from cargo_rpl.shared.errors import ConfigError, LaunchError, RplError


class TestRplError:
    def test_init_no_context(self):
        error = RplError("test message")
        assert str(error) == "test message"
        assert error.context is None

    def test_init_with_context(self):
        error = RplError("test message", "driver")
        assert str(error) == "[driver] test message"
        assert error.context == "driver"


class TestLaunchError:
    def test_init(self):
        error = LaunchError("cargo", "No such file or directory")
        assert str(error) == "could not run cargo: No such file or directory"
        assert error.command == "cargo"
        assert error.reason == "No such file or directory"
        assert isinstance(error, RplError)


class TestConfigError:
    def test_init_no_path(self):
        error = ConfigError("bad config")
        assert str(error) == "bad config"
        assert error.config_path is None

    def test_init_with_path(self):
        error = ConfigError("bad config", ".cargo-rpl.yaml")
        assert str(error) == "[.cargo-rpl.yaml] bad config"
        assert error.config_path == ".cargo-rpl.yaml"
