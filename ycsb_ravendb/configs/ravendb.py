"""
RavenDB binding configuration settings.

Manages the server URL, target database and provisioning settings used by
the document store adapter. Harness properties (``ravendb.*``) take precedence
over environment variables (``RAVENDB_*``), which take precedence over defaults.

Dependencies: pydantic, pydantic_settings
System role: Backend connection and provisioning configuration
"""

from typing import Mapping

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict

from ycsb_ravendb.configs.base import BaseSettings
from ycsb_ravendb.core.exceptions import ConfigurationError

URL_PROPERTY = "ravendb.url"
URL_DEFAULT = "http://localhost:10301"
URL_SCHEME_PREFIX = "http://"
DOCS_URL = "https://ravendb.net/docs/article-page/3.5/java/start/getting-started"

# Harness property name -> settings field name
PROPERTY_FIELDS: dict[str, str] = {
    URL_PROPERTY: "url",
    "ravendb.applyfieldfilter": "apply_field_filter",
    "ravendb.timeout": "timeout",
}


class RavenDBSettings(BaseSettings):
    """RavenDB 3.5 server and database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAVENDB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default=URL_DEFAULT, description="RavenDB server URL (http://<host>:<port>)")
    database: str = Field(default="YCSB", description="Store and database name")
    database_page_size: int = Field(
        default=1024,
        description="Maximum number of database names fetched by the existence check",
    )
    apply_field_filter: bool = Field(
        default=False,
        description="Restrict read results to the requested fields (ignored by default)",
    )
    timeout: float = Field(default=5.0, description="HTTP timeout in seconds")

    # Database document settings used when the database has to be created
    active_bundles: str = Field(default="PeriodicExport", description="Raven/ActiveBundles")
    data_dir: str = Field(default="~\\Databases\\YCSB", description="Raven/DataDir")
    anonymous_access: str = Field(default="Admin", description="Raven/AnonymousAccess")
    storage_engine: str = Field(default="voron", description="Raven/StorageEngine")

    @property
    def has_valid_url(self) -> bool:
        """Whether the URL uses the plain http:// form the binding supports."""
        return self.url.startswith(URL_SCHEME_PREFIX)

    @property
    def database_settings(self) -> dict[str, str]:
        """
        Raven settings for a newly created database.

        Returns:
            dict[str, str]: Raven/* setting names to values
        """
        return {
            "Raven/ActiveBundles": self.active_bundles,
            "Raven/DataDir": self.data_dir,
            "Raven/AnonymousAccess": self.anonymous_access,
            "Raven/StorageEngine": self.storage_engine,
        }

    @classmethod
    def from_properties(cls, properties: Mapping[str, str] | None = None) -> "RavenDBSettings":
        """
        Build settings from a harness property set.

        Args:
            properties: Harness properties; only ``ravendb.*`` keys are read

        Returns:
            RavenDBSettings: Settings with property overrides applied

        Raises:
            ConfigurationError: If a property or environment value fails validation
        """
        properties = properties or {}
        overrides = {
            field: properties[name]
            for name, field in PROPERTY_FIELDS.items()
            if name in properties
        }
        try:
            return cls(**overrides)
        except ValidationError as exc:
            error = exc.errors()[0]
            location = error.get("loc") or ()
            field = str(location[0]) if location else None
            raise ConfigurationError(
                f"Invalid RavenDB binding configuration: {error['msg']}",
                field=field,
                details={"input": error.get("input")},
            ) from exc
