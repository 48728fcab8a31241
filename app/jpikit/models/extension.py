"""Plugin extension models.

This module defines the Pydantic models holding the settings used to
package a Jenkins plugin, together with the project configuration that
wraps them in jpikit.toml.
"""

from __future__ import annotations

import logging
import os
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

DEFAULT_REPO_URL = "https://repo.jenkins-ci.org/releases"
DEFAULT_SNAPSHOT_REPO_URL = "https://repo.jenkins-ci.org/snapshots"

# Environment overrides for the deployment repositories
REPO_URL_ENV = "JPI_REPO_URL"
SNAPSHOT_REPO_URL_ENV = "JPI_SNAPSHOT_REPO_URL"

DEFAULT_CLASSES_DIRS: tuple[str, ...] = ("build/classes/java/main",)
DEFAULT_OUTPUT_FILE = "build/check-overlap/discovered.txt"

# Deprecated setting name -> (replacement field, value converter)
_DEPRECATED_ALIASES: dict[str, tuple[str, Any]] = {
    "short_name": ("plugin_id", None),
    "core_version": ("jenkins_version", None),
    "disabled_test_injection": ("generate_tests", lambda v: not v),
    "injected_test_name": ("generated_test_class_name", None),
    "require_pi": ("require_escape_by_default_in_jelly", None),
}


def trim_plugin_suffix(name: str) -> str:
    """Strip a trailing "-plugin" from a project name."""
    return name[: -len("-plugin")] if name.endswith("-plugin") else name


class PluginDeveloper(BaseModel):
    """A developer listed in the plugin metadata.

    Attributes:
        id: Developer account identifier.
        name: Full name.
        email: Contact address.
    """

    model_config = ConfigDict(extra="forbid")

    id: Annotated[str, Field(description="Developer account identifier")]
    name: Annotated[str | None, Field(description="Full name")] = None
    email: Annotated[str | None, Field(description="Contact address")] = None


class PluginLicense(BaseModel):
    """A license the plugin is distributed under."""

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(description="License name")]
    url: Annotated[str | None, Field(description="License text URL")] = None
    distribution: Annotated[str | None, Field(description="Distribution mode")] = None
    comments: Annotated[str | None, Field(description="Additional notes")] = None


class PluginExtension(BaseModel):
    """Packaging settings for a Jenkins plugin.

    Unset identifiers are derived from the project name: the plugin id
    is the project name without a trailing "-plugin", and the display
    name falls back to the plugin id. Deprecated setting names are
    accepted and mapped onto their replacements.

    Attributes:
        project_name: Name of the build project.
        plugin_id: Short name uniquely identifying the plugin.
        display_name: One-line human readable name.
        url: Home page of the plugin.
        jenkins_version: Version of Jenkins core the plugin builds against.
        compatible_since_version: Earliest plugin version whose data is compatible.
        file_extension: Archive extension.
        sandboxed: Sandbox status of the plugin.
        plugin_first_class_loader: Load plugin classes before core classes.
        masked_classes_from_core: Package prefixes hidden from core.
        generate_tests: Generate the injected test class.
        require_escape_by_default_in_jelly: Require the escape-by-default
            processing instruction in Jelly files.
        generated_test_class_name: Name of the injected test class.
        repo_url: Release repository to deploy to.
        snapshot_repo_url: Snapshot repository to deploy to.
        github_url: Source repository, used for SCM metadata.
        configure_repositories: Configure the default artifact repositories.
        configure_publishing: Configure publications and repositories.
        developers: Plugin developers.
        licenses: Plugin licenses.
    """

    model_config = ConfigDict(extra="forbid")

    project_name: Annotated[str, Field(min_length=1, description="Build project name")]
    plugin_id: Annotated[str, Field(min_length=1, description="Plugin short name")]
    display_name: Annotated[str, Field(description="Human readable name")]
    url: Annotated[str | None, Field(description="Plugin home page")] = None
    jenkins_version: Annotated[str | None, Field(description="Jenkins core version")] = None
    compatible_since_version: Annotated[
        str | None, Field(description="Earliest compatible version")
    ] = None
    file_extension: Annotated[str, Field(description="Archive extension")] = "hpi"
    sandboxed: Annotated[bool, Field(description="Sandbox status")] = False
    plugin_first_class_loader: Annotated[bool, Field(description="Plugin-first loading")] = False
    masked_classes_from_core: Annotated[
        list[str],
        Field(default_factory=list, description="Package prefixes hidden from core"),
    ]
    generate_tests: Annotated[bool, Field(description="Generate injected test")] = False
    require_escape_by_default_in_jelly: Annotated[
        bool, Field(description="Require escape-by-default in Jelly")
    ] = True
    generated_test_class_name: Annotated[
        str, Field(description="Injected test class name")
    ] = "InjectedTest"
    repo_url: Annotated[str, Field(description="Release repository")] = DEFAULT_REPO_URL
    snapshot_repo_url: Annotated[
        str, Field(description="Snapshot repository")
    ] = DEFAULT_SNAPSHOT_REPO_URL
    github_url: Annotated[str | None, Field(description="Source repository URL")] = None
    configure_repositories: Annotated[bool, Field(description="Configure repositories")] = True
    configure_publishing: Annotated[bool, Field(description="Configure publishing")] = True
    developers: Annotated[
        list[PluginDeveloper],
        Field(default_factory=list, description="Plugin developers"),
    ]
    licenses: Annotated[
        list[PluginLicense],
        Field(default_factory=list, description="Plugin licenses"),
    ]

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, data: Any) -> Any:
        """Map deprecated names and derive unset identifiers."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for old, (new, convert) in _DEPRECATED_ALIASES.items():
            if old not in data:
                continue
            value = data.pop(old)
            logger.warning("Setting '%s' is deprecated, use '%s' instead", old, new)
            if new not in data:
                data[new] = convert(value) if convert else value

        project_name = data.get("project_name")
        if isinstance(project_name, str) and not data.get("plugin_id"):
            data["plugin_id"] = trim_plugin_suffix(project_name)
        if data.get("plugin_id") and not data.get("display_name"):
            data["display_name"] = data["plugin_id"]
        return data

    @field_validator("masked_classes_from_core", mode="before")
    @classmethod
    def split_masked_classes(cls, v: object) -> object:
        """Accept a whitespace-separated string of package prefixes."""
        if isinstance(v, str):
            return v.split()
        return v

    @field_validator("masked_classes_from_core")
    @classmethod
    def dedupe_masked_classes(cls, v: list[str]) -> list[str]:
        """Drop repeated prefixes, keeping the first occurrence."""
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def apply_environment(self) -> PluginExtension:
        """Let environment variables override the deployment repositories."""
        repo_url = os.environ.get(REPO_URL_ENV)
        if repo_url:
            self.repo_url = repo_url
        snapshot_repo_url = os.environ.get(SNAPSHOT_REPO_URL_ENV)
        if snapshot_repo_url:
            self.snapshot_repo_url = snapshot_repo_url
        return self

    @property
    def mask_classes(self) -> str:
        """Masked package prefixes as a single space-separated string."""
        return " ".join(self.masked_classes_from_core)

    @property
    def archive_name(self) -> str:
        """File name of the packaged plugin archive."""
        return f"{self.plugin_id}.{self.file_extension}"


class VerificationConfig(BaseModel):
    """Inputs of the overlap check.

    Attributes:
        classes_dirs: Compiled classes directories, in merge order.
        output_file: Manifest of discovered paths.
    """

    model_config = ConfigDict(extra="forbid")

    classes_dirs: Annotated[
        list[str],
        Field(
            default_factory=lambda: list(DEFAULT_CLASSES_DIRS),
            description="Classes directories in merge order",
        ),
    ]
    output_file: Annotated[str, Field(description="Manifest destination")] = DEFAULT_OUTPUT_FILE


class ProjectConfig(BaseModel):
    """Complete jpikit.toml content."""

    model_config = ConfigDict(extra="forbid")

    plugin: Annotated[PluginExtension, Field(description="Plugin packaging settings")]
    verification: Annotated[
        VerificationConfig,
        Field(default_factory=VerificationConfig, description="Overlap check settings"),
    ]
