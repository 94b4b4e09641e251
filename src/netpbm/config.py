import configparser
from dataclasses import dataclass
from pathlib import Path

from .decoders import AsciiTermination
from .render import DEFAULT_WINDOW_TITLE

DEFAULT_CONFIG_PATH = Path('netpbm.ini')

DISPLAY_MODES = ('window', 'text')


class ConfigError(ValueError):
    pass


@dataclass
class Settings:
    mode: str = 'window'
    window_title: str = DEFAULT_WINDOW_TITLE
    scale: int = 1
    ascii_termination: AsciiTermination = AsciiTermination.STOP_ON_FIRST_UNPARSEABLE
    verbose: bool = False


def load(path: Path | None = None) -> Settings:
    """Read settings from an INI file, falling back to defaults for anything missing.

    An explicitly given path must exist; the default `netpbm.ini` in the
    working directory is optional.
    """
    read_parser = configparser.ConfigParser()

    if path is not None and not Path(path).is_file():
        raise ConfigError(f"config file '{path}' does not exist")

    defaults = Settings()

    try:
        read_parser.read(DEFAULT_CONFIG_PATH if path is None else path, encoding='utf-8')

        mode = read_parser.get('display', 'MODE', fallback=defaults.mode)
        window_title = read_parser.get('display', 'WINDOW_TITLE', fallback=defaults.window_title)
        scale = read_parser.getint('display', 'SCALE', fallback=defaults.scale)
        termination = read_parser.get('decoding', 'ASCII_TERMINATION', fallback=defaults.ascii_termination.value)
        verbose = read_parser.getboolean('diagnostics', 'VERBOSE', fallback=defaults.verbose)
    except (configparser.Error, ValueError) as e:
        # configparser.Error covers files without section headers or with duplicate sections
        raise ConfigError(f"There was an issue reading '{path or DEFAULT_CONFIG_PATH}': {e}") from e

    if mode not in DISPLAY_MODES:
        raise ConfigError(f"'MODE' should be one of {', '.join(DISPLAY_MODES)}, not '{mode}'")

    if scale < 1:
        raise ConfigError(f"'SCALE' should be a positive integer, not {scale}")

    try:
        ascii_termination = AsciiTermination(termination)
    except ValueError:
        choices = ', '.join(policy.value for policy in AsciiTermination)
        raise ConfigError(f"'ASCII_TERMINATION' should be one of {choices}, not '{termination}'") from None

    return Settings(
        mode=mode,
        window_title=window_title,
        scale=scale,
        ascii_termination=ascii_termination,
        verbose=verbose
    )
