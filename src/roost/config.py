"""Registry configuration.

RegistryConfig is a frozen dataclass, immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Route registry configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RegistryConfig(normalize_methods=False)
    """

    # Upper-case method names before they are stored and compared
    normalize_methods: bool = True

    # Emit a DEBUG record on "roost.registry" for every accepted route
    log_registrations: bool = True
