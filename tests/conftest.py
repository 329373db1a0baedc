"""Pytest configuration and fixtures for apigen tests"""

import json

import pytest

from apigen.codegen.core import GenerationContext, OverrideTables
from apigen.codegen.languages.java import JavaGenerator


@pytest.fixture
def chromium_idd():
    """Two small interfaces from the browser-automation IDD"""
    return {
        "ChromiumBrowser": {
            "name": "ChromiumBrowser",
            "extends": "Browser",
            "members": {
                "newBrowserCDPSession": {
                    "kind": "method",
                    "name": "newBrowserCDPSession",
                    "type": {"name": "Promise<CDPSession>"},
                    "required": True,
                    "args": {},
                },
                "startTracing": {
                    "kind": "method",
                    "name": "startTracing",
                    "type": {"name": "Promise"},
                    "required": True,
                    "args": {
                        "page": {
                            "kind": "property",
                            "name": "page",
                            "type": {"name": "Page"},
                            "required": False,
                        },
                        "options": {
                            "kind": "property",
                            "name": "options",
                            "type": {
                                "name": "Object",
                                "properties": {
                                    "path": {
                                        "kind": "property",
                                        "name": "path",
                                        "type": {"name": "string"},
                                        "required": False,
                                    },
                                    "screenshots": {
                                        "kind": "property",
                                        "name": "screenshots",
                                        "type": {"name": "boolean"},
                                        "required": False,
                                    },
                                    "categories": {
                                        "kind": "property",
                                        "name": "categories",
                                        "type": {"name": "Array<string>"},
                                        "required": False,
                                    },
                                },
                            },
                            "required": False,
                        },
                    },
                },
                "stopTracing": {
                    "kind": "method",
                    "name": "stopTracing",
                    "type": {"name": "Promise<Buffer>"},
                    "required": True,
                    "args": {},
                },
            },
        },
        "ChromiumBrowserContext": {
            "name": "ChromiumBrowserContext",
            "extends": "BrowserContext",
            "members": {
                "backgroundpage": {
                    "kind": "event",
                    "name": "backgroundpage",
                    "type": {"name": "Page"},
                },
                "serviceworker": {
                    "kind": "event",
                    "name": "serviceworker",
                    "type": {"name": "Worker"},
                },
                "backgroundPages": {
                    "kind": "property",
                    "name": "backgroundPages",
                    "type": {"name": "Array<Page>"},
                },
                "newCDPSession": {
                    "kind": "method",
                    "name": "newCDPSession",
                    "type": {"name": "Promise<CDPSession>"},
                    "args": {
                        "page": {
                            "name": "page",
                            "type": {"name": "Page"},
                            "required": True,
                        }
                    },
                },
                "serviceWorkers": {
                    "kind": "property",
                    "name": "serviceWorkers",
                    "type": {"name": "Array<Worker>"},
                },
            },
        },
    }


@pytest.fixture
def idd_file(tmp_path, chromium_idd):
    """The sample IDD written to a JSON file"""
    path = tmp_path / "api.json"
    path.write_text(json.dumps(chromium_idd), encoding="utf-8")
    return path


@pytest.fixture
def make_context():
    """Factory for generation contexts with the given override tables"""

    def _make(overrides=None):
        return GenerationContext(overrides=overrides or OverrideTables())

    return _make


@pytest.fixture
def bare_tables():
    """Override tables with nothing but the java.util import"""
    return OverrideTables(imports={"import java.util.*;": ()})


@pytest.fixture
def bare_generator(bare_tables):
    """Java generator without curated tables or license header"""
    return JavaGenerator(
        {"package_name": "com.example.api", "add_license_header": False},
        overrides=bare_tables,
    )
