# --- Configuration ---
# Fixed protocol parameters for RFC 2616 messages. Nothing here is read from
# the environment; these values define the grammar the constructors enforce.

# Highest version a response start-line may carry.
MAX_HTTP_MAJOR_VERSION = 1
MAX_HTTP_MINOR_VERSION = 1

# Version advertised by every request start-line.
REQUEST_HTTP_MAJOR_VERSION = 1
REQUEST_HTTP_MINOR_VERSION = 1

MAX_STATUS_CODE = 999
MAX_PORT = 65535

# Absolute request targets are limited to these schemes (compared lower-case).
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}
ALLOWED_TARGET_SCHEMES = frozenset(DEFAULT_PORTS)

# Headers a request message owns and callers may not change.
REQUEST_PROTECTED_HEADERS = ("Host",)
RESPONSE_PROTECTED_HEADERS = ()

# CR and LF. 0x10 and 0x13 are also refused for compatibility with older callers.
REASON_PHRASE_FORBIDDEN_CHARS = frozenset("\r\n\x10\x13")
