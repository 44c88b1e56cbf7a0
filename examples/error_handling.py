"""Error handling patterns.

Unresolved and unreadable files never stop a run; they are counted in
the summary. Failures that do stop a run raise a JarhuntError subclass
carrying a recovery hint.
"""

from jarhunt import (
    ConfigurationError,
    HuntConfig,
    JarhuntError,
    LookupTransportError,
    hunt,
    validate_root,
)


root = "lib"

try:
    validate_root(root)
except ConfigurationError as e:
    raise SystemExit(str(e)) from None

try:
    summary = hunt(HuntConfig(root=root, timeout=5.0))
except LookupTransportError as e:
    # The search service could not be reached; nothing more was looked up
    print(f"Search failed for {e.host}{e.request_path}")
    print(f"Hint: {e.recovery_hint}")
except JarhuntError as e:
    print(f"Error: {e}")
    if e.recovery_hint:
        print(f"Hint: {e.recovery_hint}")
else:
    print(f"{summary.unreadable} files could not be read")
