"""Production adapters for application ports."""

from src.infrastructure.adapters.email_validator_adapter import EmailValidatorAdapter
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["EmailValidatorAdapter", "SystemTimeAuthority"]
