from papi.openapi.info import (
    Contact,
    Info,
    License,
    ParameterIn,
    SecurityRequirement,
    SecurityScheme,
    SecuritySchemeFlow,
    SecuritySchemeFlows,
    Server,
    Tag,
)


def test_contact_always_has_all_keys():
    assert Contact(name="Support").to_dict() == {
        "name": "Support",
        "url": "",
        "email": "",
    }


def test_license_url_wins_over_identifier():
    lic = License(name="MIT", identifier="MIT", url="https://example.com/license")
    assert lic.to_dict() == {"name": "MIT", "url": "https://example.com/license"}


def test_license_identifier_when_no_url():
    assert License(name="MIT", identifier="MIT").to_dict() == {
        "name": "MIT",
        "identifier": "MIT",
    }


def test_info_minimal():
    assert Info(title="Demo API").to_dict() == {"title": "Demo API", "version": ""}


def test_info_full_key_order():
    info = Info(
        title="Demo API",
        description="d",
        terms_of_service="t",
        contact=Contact(name="c", email="c@example.com"),
        license=License(name="MIT"),
        version="1",
    )
    doc = info.to_dict()
    assert list(doc) == [
        "title", "description", "termsOfService", "contact", "license", "version"
    ]
    assert doc["contact"] == info.contact.to_dict()
    assert doc["license"] == {"name": "MIT"}


def test_info_skips_contact_without_name():
    info = Info(title="x", contact=Contact(url="https://example.com"))
    assert "contact" not in info.to_dict()


def test_server_order():
    doc = Server(description="Local", url="http://localhost:3001").to_dict()
    assert list(doc.items()) == [("url", "http://localhost:3001"), ("description", "Local")]


def test_tag_description_optional():
    assert Tag("users").to_dict() == {"name": "users"}
    assert Tag("users", "User things").to_dict() == {
        "name": "users",
        "description": "User things",
    }


def test_parameter_in_values():
    assert [str(p) for p in ParameterIn] == ["query", "header", "path", "cookie"]
    assert ParameterIn("path") is ParameterIn.PATH


def test_security_requirement():
    req = SecurityRequirement("token", ["read", "write"])
    assert not req.is_zero()
    assert req.to_list() == ["read", "write"]
    assert SecurityRequirement().is_zero()


def test_flow_includes_empty_scopes():
    flow = SecuritySchemeFlow("https://example.com/auth", "https://example.com/token")
    assert flow.to_dict() == {
        "authorizationUrl": "https://example.com/auth",
        "tokenUrl": "https://example.com/token",
        "refreshUrl": "",
        "scopes": {},
    }


def test_flows_zero_follows_authorization_code():
    assert SecuritySchemeFlows().is_zero()
    flows = SecuritySchemeFlows(SecuritySchemeFlow("https://example.com/auth"))
    assert not flows.is_zero()
    assert flows.to_dict() == {"authorizationCode": flows.authorization_code.to_dict()}


def test_security_scheme_minimal():
    scheme = SecurityScheme(scheme_name="token", type="http")
    assert scheme.to_dict() == {"type": "http"}
    assert not scheme.is_zero()
    assert SecurityScheme().is_zero()


def test_security_scheme_full():
    scheme = SecurityScheme(
        scheme_name="token",
        type="http",
        description="API token",
        name="Authorization",
        in_="header",
        scheme="bearer",
        bearer_format="base32hex",
        flows=SecuritySchemeFlows(SecuritySchemeFlow("https://example.com/auth")),
        open_id_connect_url="https://example.com/oidc",
    )
    doc = scheme.to_dict()
    assert list(doc) == [
        "type", "description", "name", "in", "scheme",
        "bearerFormat", "flows", "openIdConnectUrl",
    ]
    assert doc["bearerFormat"] == "base32hex"
    assert doc["flows"] == scheme.flows.to_dict()