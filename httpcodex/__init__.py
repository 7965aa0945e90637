__version__ = "0.1.0"

from .classes import StatusClass
from .classes import is_client_error
from .classes import is_error
from .classes import is_informational
from .classes import is_redirect
from .classes import is_server_error
from .classes import is_success
from .codes import StatusCode
from .errors.base import HttpCodexError
from .errors.codes import InvalidStatusCodeType
from .errors.codes import NoStatusCodeValue
