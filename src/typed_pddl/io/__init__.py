"""Import classes and definitions used for input/output or user interfaces."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_info as log_info
from .settings import ParserSettings as ParserSettings
from .settings import load_settings as load_settings
from .settings import load_settings_data as load_settings_data
