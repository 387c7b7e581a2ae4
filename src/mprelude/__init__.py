"""mprelude: Maybe and Either types with functor and monad combinators.

Flat imports (preferred):
    from mprelude import Maybe, Just, Nothing
    from mprelude import Either, Left, Right, wrap_error, catching

Submodule imports (for organization):
    from mprelude.maybe import Just, Nothing, NothingType
    from mprelude.either import Left, Right, wrap_error
    from mprelude.errors import MissingCallbackError, WrongVariantError
"""

from mprelude._config import PreludeConfig, get_config, init
from mprelude._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger
from mprelude.decorators import catching
from mprelude.either import Either, ErrorKinds, Left, Right, wrap_error
from mprelude.errors import MissingCallbackError, PreludeError, WrongVariantError
from mprelude.maybe import Just, Maybe, Nothing, NothingType

__all__ = [
    # Maybe
    'Just',
    'Maybe',
    'Nothing',
    'NothingType',
    # Either
    'Either',
    'ErrorKinds',
    'Left',
    'Right',
    'catching',
    'wrap_error',
    # Errors
    'MissingCallbackError',
    'PreludeError',
    'WrongVariantError',
    # Configuration
    'PreludeConfig',
    'get_config',
    'init',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
]
