from .event import InternalEvent, InternalResult
from .i18n import DomainLocale, I18nConfig

__all__ = [
    "DomainLocale",
    "I18nConfig",
    "InternalEvent",
    "InternalResult",
]
