# .env must be loaded before the logger reads CAVEO_LOGLEVEL
from . import env
from .logger import logger
from .utils import *
