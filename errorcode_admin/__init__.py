from . import config as _config
from . import entities as _entities
from . import exceptions as _exceptions
from . import models as _models
from . import repositories as _repositories
from . import services as _services
from . import utils as _utils
from .config import *  # type: ignore  # noqa: F401,F403
from .entities import *  # type: ignore  # noqa: F401,F403
from .exceptions import *  # type: ignore  # noqa: F401,F403
from .models import *  # type: ignore  # noqa: F401,F403
from .repositories import *  # type: ignore  # noqa: F401,F403
from .services import *  # type: ignore  # noqa: F401,F403
from .utils import *  # type: ignore  # noqa: F401,F403
from .main import app

__all__ = [
    *_config.__all__,
    *_entities.__all__,
    *_exceptions.__all__,
    *_models.__all__,
    *_repositories.__all__,
    *_services.__all__,
    *_utils.__all__,
    "app",
]
