"""
i18n configuration schemas

The configuration is validated once when the process starts and is then
shared read-only between all requests, so every model here is frozen.
Field names follow the camelCase keys used in framework config files.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class DomainLocale(BaseModel):
    """A delivery domain and the locales it serves."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    domain: str = Field(..., min_length=1, description="Host, optionally with a port (e.g. example.fr:8080).")
    default_locale: str = Field(..., min_length=1, description="Locale served at the domain root.")
    locales: tuple[str, ...] | None = Field(None, description="Other locales served by this domain.")
    http: bool | None = Field(None, description="Serve this domain over plain http instead of https.")

    @property
    def hostname(self) -> str:
        """Lower-cased host with any port removed."""
        return self.domain.split(":", 1)[0].lower()


class I18nConfig(BaseModel):
    """Locales served by the application and how they are detected."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    locales: tuple[str, ...] = Field(..., min_length=1)
    default_locale: str
    locale_detection: bool | None = None
    domains: tuple[DomainLocale, ...] | None = None

    @field_validator("locales")
    @classmethod
    def locales_not_blank(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not locale.strip() for locale in v):
            raise ValueError("locales must not contain blank entries")
        return v

    @model_validator(mode="after")
    def default_locale_is_configured(self) -> I18nConfig:
        if self.default_locale not in self.locales:
            raise ValueError(f"defaultLocale '{self.default_locale}' is not one of the configured locales")
        return self

    @model_validator(mode="after")
    def domain_locales_are_configured(self) -> I18nConfig:
        for domain in self.domains or ():
            if domain.default_locale not in self.locales:
                raise ValueError(
                    f"defaultLocale '{domain.default_locale}' of domain '{domain.domain}' is not one of the configured locales"
                )
            unknown = [locale for locale in domain.locales or () if locale not in self.locales]
            if unknown:
                raise ValueError(f"locales {unknown} of domain '{domain.domain}' are not configured locales")
        return self
