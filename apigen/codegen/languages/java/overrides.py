"""
Curated override tables for the Java bindings.

These tables are keyed by schema path and written against a particular
revision of the browser-automation IDD. When the IDD changes shape at one of
these paths, resolution fails with TypeMappingMismatchError rather than
emitting a wrong type, and the entry here has to be updated.
"""

from typing import Dict, List

from ...core.overrides import OverrideTables, TypeOverride, types_defined_elsewhere
from .naming import METHOD_NAME_OVERRIDES

BUTTON = '"left"|"right"|"middle"'
MODIFIERS = 'Array<"Alt"|"Control"|"Meta"|"Shift">'
LOAD_STATE = '"load"|"domcontentloaded"|"networkidle"'


def _verbatim(source: str, target: str) -> TypeOverride:
    """Override rendered as written, declared by a shared type or primitive."""
    return TypeOverride(source, target, define_types=types_defined_elsewhere)


def _type_overrides() -> Dict[str, TypeOverride]:
    overrides = {}

    for method in ("down", "up", "click", "dblclick"):
        overrides[f"Mouse.{method}.options.button"] = _verbatim(BUTTON, "Button")

    for owner in ("Page", "Frame", "ElementHandle"):
        for method in ("click", "dblclick"):
            overrides[f"{owner}.{method}.options.button"] = _verbatim(
                BUTTON, "Mouse.Button"
            )
        for method in ("click", "dblclick", "hover"):
            overrides[f"{owner}.{method}.options.modifiers"] = _verbatim(
                MODIFIERS, "Set<Keyboard.Modifier>"
            )

    for owner in ("Page", "Frame"):
        overrides[f"{owner}.waitForLoadState.state"] = TypeOverride(
            LOAD_STATE, "LoadState"
        )
        overrides[f"{owner}.waitForFunction.options.polling"] = _verbatim(
            'number|"raf"', "Integer"
        )
        overrides[f"{owner}.waitForNavigation.options.url"] = TypeOverride(
            "string|RegExp|Function", "String"
        )

    overrides["Page.emulateMedia.params.media"] = TypeOverride(
        '"screen"|"print"|null', "Media"
    )
    overrides["Page.emulateMedia.params.colorScheme"] = TypeOverride(
        '"light"|"dark"|"no-preference"|null', "ColorScheme"
    )
    overrides["Page.viewportSize"] = _verbatim("null|Object", "Viewport")
    overrides["Page.setViewportSize.viewportSize"] = _verbatim("Object", "Viewport")

    for method in ("newContext", "newPage"):
        overrides[f"Browser.{method}.options.viewport"] = _verbatim(
            "null|Object", "Page.Viewport"
        )
        overrides[f"Browser.{method}.options.httpCredentials"] = _verbatim(
            "Object", "BrowserContext.HTTPCredentials"
        )
    overrides["BrowserContext.setHTTPCredentials.httpCredentials"] = _verbatim(
        "null|Object", "HTTPCredentials"
    )

    overrides["ElementHandle.boundingBox"] = _verbatim(
        "Promise<null|Object>", "BoundingBox"
    )
    overrides["Keyboard.type.options"] = _verbatim("Object", "int")
    overrides["Keyboard.press.options"] = _verbatim("Object", "int")
    overrides["Route.continue.overrides.postData"] = TypeOverride(
        "string|Buffer", "byte[]"
    )
    overrides["ChromiumBrowser.startTracing.options.path"] = TypeOverride(
        "string", "File"
    )

    return overrides


def _set_input_files(prefix: str, name: str, options: str) -> List[str]:
    """Overloads for methods taking files or in-memory payloads."""
    head = "String selector, " if prefix else ""
    arg = "selector, " if prefix else ""
    lines = []
    payloads = (
        ("File", "File[]"),
        ("FileChooser.FilePayload", "FileChooser.FilePayload[]"),
    )
    for single, multi in payloads:
        lines.extend(
            [
                f"default void {name}({head}{single} file) {{ {name}({arg}file, null); }}",
                f"default void {name}({head}{single} file, {options} options) "
                f"{{ {name}({arg}new {single}[]{{ file }}, options); }}",
                f"default void {name}({head}{multi} files) {{ {name}({arg}files, null); }}",
                f"void {name}({head}{multi} files, {options} options);",
            ]
        )
    return lines


ROUTE = [
    "void route(String url, BiConsumer<Route, Request> handler);",
    "void route(Pattern url, BiConsumer<Route, Request> handler);",
    "void route(Predicate<String> url, BiConsumer<Route, Request> handler);",
]

UNROUTE = [
    "default void unroute(String url) { unroute(url, null); }",
    "default void unroute(Pattern url) { unroute(url, null); }",
    "default void unroute(Predicate<String> url) { unroute(url, null); }",
    "void unroute(String url, BiConsumer<Route, Request> handler);",
    "void unroute(Pattern url, BiConsumer<Route, Request> handler);",
    "void unroute(Predicate<String> url, BiConsumer<Route, Request> handler);",
]

WAIT_FOR_EVENT = [
    "default Deferred<Event<EventType>> waitForEvent(EventType event) {",
    "  return waitForEvent(event, (WaitForEventOptions) null);",
    "}",
    "default Deferred<Event<EventType>> waitForEvent(EventType event, Predicate<Event<EventType>> predicate) {",
    "  WaitForEventOptions options = new WaitForEventOptions();",
    "  options.predicate = predicate;",
    "  return waitForEvent(event, options);",
    "}",
    "Deferred<Event<EventType>> waitForEvent(EventType event, WaitForEventOptions options);",
]


def _signatures() -> Dict[str, List[str]]:
    signatures = {
        "Page.setViewportSize": ["void setViewportSize(int width, int height);"],
        "BrowserContext.setHTTPCredentials": [
            "void setHTTPCredentials(String username, String password);"
        ],
        "Page.frame": [
            "Frame frameByName(String name);",
            "Frame frameByUrl(String glob);",
            "Frame frameByUrl(Pattern pattern);",
            "Frame frameByUrl(Predicate<String> predicate);",
        ],
        "Page.route": list(ROUTE),
        "BrowserContext.route": list(ROUTE),
        "Page.unroute": list(UNROUTE),
        "BrowserContext.unroute": list(UNROUTE),
        "FileChooser.setFiles": _set_input_files("", "setFiles", "SetFilesOptions"),
        "ElementHandle.setInputFiles": _set_input_files(
            "", "setInputFiles", "SetInputFilesOptions"
        ),
        "Page.setInputFiles": _set_input_files(
            "selector", "setInputFiles", "SetInputFilesOptions"
        ),
        "Frame.setInputFiles": _set_input_files(
            "selector", "setInputFiles", "SetInputFilesOptions"
        ),
        "Page.waitForEvent": list(WAIT_FOR_EVENT),
        "BrowserContext.waitForEvent": list(WAIT_FOR_EVENT),
    }

    # Field declarations
    for owner in ("Page", "Frame"):
        signatures[f"{owner}.waitForNavigation.options.url"] = [
            "public String glob;",
            "public Pattern pattern;",
            "public Predicate<String> predicate;",
        ]
        signatures[f"{owner}.waitForFunction.options.polling"] = [
            "public Integer pollingInterval;"
        ]
    return signatures


def _builders() -> Dict[str, List[str]]:
    builders = {}
    for owner in ("Page", "Frame"):
        builders[f"{owner}.waitForNavigation.options.url"] = [
            "public WaitForNavigationOptions withUrl(String glob) {",
            "  this.glob = glob;",
            "  return this;",
            "}",
            "public WaitForNavigationOptions withUrl(Pattern pattern) {",
            "  this.pattern = pattern;",
            "  return this;",
            "}",
            "public WaitForNavigationOptions withUrl(Predicate<String> predicate) {",
            "  this.predicate = predicate;",
            "  return this;",
            "}",
        ]
        builders[f"{owner}.waitForFunction.options.polling"] = [
            "public WaitForFunctionOptions withRequestAnimationFrame() {",
            "  this.pollingInterval = null;",
            "  return this;",
            "}",
            "public WaitForFunctionOptions withPollingInterval(int millis) {",
            "  this.pollingInterval = millis;",
            "  return this;",
            "}",
        ]
    builders["Route.continue.overrides.postData"] = [
        "public ContinueOverrides withPostData(String postData) {",
        "  this.postData = postData.getBytes(StandardCharsets.UTF_8);",
        "  return this;",
        "}",
        "public ContinueOverrides withPostData(byte[] postData) {",
        "  this.postData = postData;",
        "  return this;",
        "}",
    ]
    return builders


def build_default_overrides() -> OverrideTables:
    """Return a fresh copy of the default Java override tables."""
    file_users = (
        "Page",
        "Frame",
        "ElementHandle",
        "FileChooser",
        "ChromiumBrowser",
        "Route",
    )
    route_users = ("Page", "BrowserContext")

    return OverrideTables(
        type_overrides=_type_overrides(),
        signatures=_signatures(),
        builders=_builders(),
        param_names={
            "Keyboard.type.options": "delay",
            "Keyboard.press.options": "delay",
        },
        method_names=dict(METHOD_NAME_OVERRIDES),
        imports={
            "import java.nio.charset.StandardCharsets;": ("Route",),
            "import java.io.File;": file_users,
            "import java.util.*;": (),
            "import java.util.function.BiConsumer;": route_users,
            "import java.util.function.Predicate;": ("Page", "Frame", "BrowserContext"),
            "import java.util.regex.Pattern;": ("Page", "Frame", "BrowserContext"),
        },
        shared_types={
            "Mouse": ["shared/mouse_button.java.j2"],
            "Keyboard": ["shared/keyboard_modifier.java.j2"],
            "Page": [
                "shared/viewport.java.j2",
                "shared/function.java.j2",
                "shared/binding.java.j2",
                "shared/error.java.j2",
                "shared/wait_for_event_options.java.j2",
            ],
            "BrowserContext": [
                "shared/http_credentials.java.j2",
                "shared/wait_for_event_options.java.j2",
            ],
            "ElementHandle": ["shared/bounding_box.java.j2"],
            "FileChooser": ["shared/file_payload.java.j2"],
        },
        base_interfaces=("Browser", "JSHandle", "BrowserContext"),
        # The IDD does not list the page close event
        extra_event_values={"Page": ["CLOSE"]},
        extra_members={
            "Worker": ["Deferred<Event<EventType>> waitForEvent(EventType event);"]
        },
        value_constructors={
            "Viewport": ["int width", "int height"],
            "Page.Viewport": ["int width", "int height"],
            "HTTPCredentials": ["String username", "String password"],
            "BrowserContext.HTTPCredentials": ["String username", "String password"],
        },
    )
