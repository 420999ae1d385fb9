"""nullsafe: presence and capture combinators for Python 3.13+.

Flat imports (preferred):
    from nullsafe import if_present, or_else, fail_if_absent, tap_capture
    from nullsafe import Some, Nothing, Captured

Submodule imports (for organization):
    from nullsafe.presence import if_present, filter_if, cast_to
    from nullsafe.guards import fail_if, fail_if_absent
    from nullsafe.capture import transform_capture_only, catch
    from nullsafe.decorators import capturing
"""

# Capture combinators
from nullsafe.capture import (
    Captured,
    catch,
    tap_capture,
    tap_capture_only,
    tap_capture_when,
    transform_capture,
    transform_capture_only,
    transform_capture_when,
)

# Configuration and logging
from nullsafe._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    failure_logger,
    get_logger,
    remove_log_hook,
)
from nullsafe.config import NullsafeConfig, get_config, init

# Decorators
from nullsafe.decorators import capturing, capturing_async

# Errors
from nullsafe.errors import AbsentValueError

# Guard combinators
from nullsafe.guards import fail_if, fail_if_absent

# Option types
from nullsafe.option import (
    Maybe,
    Nothing,
    NothingType,
    Option,
    Some,
    absent_like,
    from_nullable,
    payload_of,
)

# Presence combinators
from nullsafe.presence import (
    cast_to,
    filter_if,
    filter_if_not,
    if_present,
    if_present_do,
    is_absent,
    is_present,
    map_or_absent,
    or_else,
    recover,
    recover_with,
)

__all__ = [
    'AbsentValueError',
    'Captured',
    'Maybe',
    'Nothing',
    'NothingType',
    'NullsafeConfig',
    'Option',
    'Some',
    'absent_like',
    'add_log_hook',
    'capturing',
    'capturing_async',
    'cast_to',
    'catch',
    'clear_log_hooks',
    'configure_logging',
    'fail_if',
    'fail_if_absent',
    'failure_logger',
    'filter_if',
    'filter_if_not',
    'from_nullable',
    'get_config',
    'get_logger',
    'if_present',
    'if_present_do',
    'init',
    'is_absent',
    'is_present',
    'map_or_absent',
    'or_else',
    'payload_of',
    'recover',
    'recover_with',
    'remove_log_hook',
    'tap_capture',
    'tap_capture_only',
    'tap_capture_when',
    'transform_capture',
    'transform_capture_only',
    'transform_capture_when',
]
