"""Localization settings."""

from typing import Optional

from pydantic import Field, field_validator

from localekit.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Localization configuration.

    Environment Variables:
        I18N_LOCALE: Active display locale tag (default: en-US)
        I18N_TRANSLATIONS_DIR: Directory holding <domain>.<locale>.yml files
        I18N_NAMESPACE: Namespace bound to the main translator (default: site)
        I18N_USE_CACHE: Cache parsed catalogs in memory (default: True)

    Example:
        ```python
        from localekit.configuration import settings

        locale = settings.i18n.locale
        ```
    """

    locale: str = Field(
        default="en-US",
        alias="I18N_LOCALE",
        description="Active display locale (BCP 47 tag)",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory with YAML translation files",
    )
    namespace: str = Field(
        default="site",
        alias="I18N_NAMESPACE",
        description="Catalog namespace bound to the main translator",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache loaded catalogs in memory",
    )

    @field_validator("locale", mode="before")
    @classmethod
    def validate_locale(cls, v: Optional[str]) -> str:
        """Normalize empty values to the default locale."""
        if not v:
            return "en-US"
        return str(v).strip().replace("_", "-")
