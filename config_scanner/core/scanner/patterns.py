"""
Detection catalogs

Fixed lists the scanner matches against. Extending any of them changes what
gets reported without touching the detection algorithm.
"""

# Configuration-service type names searched for in import statements
SERVICE_TYPES: tuple[str, ...] = (
    "EtcdService",
    "ConfigService",
)

# Accessor methods treated as configuration lookups
ACCESSOR_METHODS: tuple[str, ...] = (
    "get",
    "getOrThrow",
)

# Callee substrings that are never service calls (web routing shares `.get`)
EXCLUDED_CALLEE_SUBSTRINGS: tuple[str, ...] = (
    "app.get",
)

# Global environment accessor; reads are reported as `process.env.<NAME>`
ENV_VAR_ROOT = "process.env"
