"""Descriptive parts of an OpenAPI document: info, servers, tags and security."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass
class Contact:
    name: str = ""
    url: str = ""
    email: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "url": self.url, "email": self.email}


@dataclass
class License:
    name: str = ""
    identifier: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, str]:
        """The licence object; a URL takes precedence over an identifier."""
        doc = {"name": self.name}
        if self.url:
            doc["url"] = self.url
        elif self.identifier:
            doc["identifier"] = self.identifier
        return doc


@dataclass
class Info:
    title: str = ""
    description: str = ""
    terms_of_service: str = ""
    contact: Contact = field(default_factory=Contact)
    license: License = field(default_factory=License)
    version: str = ""

    def to_dict(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"title": self.title}
        if self.description:
            doc["description"] = self.description
        if self.terms_of_service:
            doc["termsOfService"] = self.terms_of_service
        if self.contact.name:
            doc["contact"] = self.contact.to_dict()
        if self.license.name:
            doc["license"] = self.license.to_dict()
        doc["version"] = self.version
        return doc


@dataclass
class Server:
    description: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "description": self.description}


@dataclass
class Tag:
    name: str
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        doc = {"name": self.name}
        if self.description:
            doc["description"] = self.description
        return doc


class ParameterIn(str, Enum):
    """Where an operation parameter is located."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"

    def __str__(self) -> str:
        return self.value


@dataclass
class SecurityRequirement:
    name: str = ""
    scopes: list[str] = field(default_factory=list)

    def is_zero(self) -> bool:
        return self.name == ""

    def to_list(self) -> list[str]:
        return list(self.scopes)


@dataclass
class SecuritySchemeFlow:
    authorization_url: str = ""
    token_url: str = ""
    refresh_url: str = ""

    def is_zero(self) -> bool:
        return self.authorization_url == ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "authorizationUrl": self.authorization_url,
            "tokenUrl": self.token_url,
            "refreshUrl": self.refresh_url,
            "scopes": {},
        }


@dataclass
class SecuritySchemeFlows:
    authorization_code: SecuritySchemeFlow = field(default_factory=SecuritySchemeFlow)

    def is_zero(self) -> bool:
        return self.authorization_code.is_zero()

    def to_dict(self) -> dict[str, Any]:
        return {"authorizationCode": self.authorization_code.to_dict()}


@dataclass
class SecurityScheme:
    scheme_name: str = ""
    type: str = ""
    description: str = ""
    name: str = ""
    in_: str = ""
    scheme: str = ""
    bearer_format: str = ""
    flows: SecuritySchemeFlows = field(default_factory=SecuritySchemeFlows)
    open_id_connect_url: str = ""

    def is_zero(self) -> bool:
        return self.scheme_name == ""

    def to_dict(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": self.type}
        for key, value in (
            ("description", self.description),
            ("name", self.name),
            ("in", self.in_),
            ("scheme", self.scheme),
            ("bearerFormat", self.bearer_format),
        ):
            if value:
                doc[key] = value
        if not self.flows.is_zero():
            doc["flows"] = self.flows.to_dict()
        if self.open_id_connect_url:
            doc["openIdConnectUrl"] = self.open_id_connect_url
        return doc