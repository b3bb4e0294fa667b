from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from beanwire.lock_mode import LockMode
from beanwire.policies import DuplicateDefinitionPolicy


class ContextSettings(BaseSettings):
    """Context configuration read from ``BEANWIRE_*`` environment variables.

    Examples:
        .. code-block:: bash

            BEANWIRE_LOCK_MODE=none
            BEANWIRE_DUPLICATE_POLICY=error

    """

    model_config = SettingsConfigDict(env_prefix="BEANWIRE_", frozen=True)

    lock_mode: LockMode = LockMode.THREAD
    """Locking strategy for singleton construction."""

    duplicate_policy: DuplicateDefinitionPolicy = DuplicateDefinitionPolicy.LAST_WINS
    """How the registry treats repeated bean names."""
