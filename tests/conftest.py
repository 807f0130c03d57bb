from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from signup_check.browser import BrowserConfig, BrowserSession
from signup_check.config import SiteConfig
from signup_check.driver import PlaywrightDriver
from signup_check.errors import ElementResolutionError
from signup_check.logging_utils import PACKAGE_LOGGER
from signup_check.page_utils import open_sign_up_page
from signup_check.sign_up_page import COUNTRY_QUERY, SignUpPage

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
SIGN_UP_HTML_PATH = FIXTURES_DIR / "sign_up.html"
FIXTURE_BASE_URL = "https://signup.test/"
COUNTRIES = [
    "Germany",
    "Norway",
    "Spain",
    "Sweden",
    "Switzerland",
    "United Kingdom",
    "United States",
]
OPTION_PREFIX = "country-option-"


class FakeElement:
    def __init__(self, name: str) -> None:
        self.name = name
        self.value = ""
        self.checked = False
        self.text: Optional[str] = None
        self.attributes: Dict[str, str] = {}
        self.calls: List[tuple] = []

    def fill(self, text: str) -> None:
        self.calls.append(("fill", text))
        self.value = text

    def click(self, *, force: bool = False) -> None:
        self.calls.append(("click", force))

    def check(self, *, force: bool = False) -> None:
        self.calls.append(("check", force))
        self.checked = True

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def text_content(self) -> Optional[str]:
        return self.text

    def input_value(self) -> str:
        return self.value


class MissingElement(FakeElement):
    def _fail(self, *args, **kwargs):
        raise ElementResolutionError(self.name, "no element matched")

    fill = click = check = get_attribute = text_content = input_value = _fail


class FakeCountryCombobox(FakeElement):
    """Filters case-insensitively and highlights candidates on ArrowDown."""

    def __init__(self, countries: Iterable[str]) -> None:
        super().__init__(COUNTRY_QUERY)
        self.countries = list(countries)
        self.matches: List[str] = []
        self.active = -1

    def fill(self, text: str) -> None:
        super().fill(text)
        query = text.strip().lower()
        self.matches = [c for c in self.countries if query and query in c.lower()]
        self._set_active(-1)

    def press(self, key: str) -> None:
        if key == "ArrowDown" and self.matches:
            self._set_active(min(self.active + 1, len(self.matches) - 1))
        elif key == "Enter" and self.active >= 0:
            self.value = self.matches[self.active]
            self.matches = []
            self._set_active(-1)

    def option_text(self, option_id: str) -> Optional[str]:
        if not option_id.startswith(OPTION_PREFIX):
            return None
        index = int(option_id[len(OPTION_PREFIX):])
        if 0 <= index < len(self.matches):
            return self.matches[index]
        return None

    def _set_active(self, index: int) -> None:
        self.active = index
        if index >= 0:
            self.attributes["aria-activedescendant"] = f"{OPTION_PREFIX}{index}"
        else:
            self.attributes.pop("aria-activedescendant", None)


class FakeDriver:
    def __init__(self, countries: Iterable[str] = COUNTRIES, missing: Iterable[str] = ()) -> None:
        self.combobox = FakeCountryCombobox(countries)
        self.missing = set(missing)
        self.elements: Dict[str, FakeElement] = {}
        self.resolutions: List[str] = []
        self.keys: List[str] = []

    def resolve_by_semantic_label(self, label: str) -> FakeElement:
        return self._resolve(label)

    def resolve_by_structural_query(self, query: str) -> FakeElement:
        if query.startswith('[id="') and query.endswith('"]'):
            option = FakeElement(query)
            option.text = self.combobox.option_text(query[5:-2])
            return option
        if query == COUNTRY_QUERY:
            self.resolutions.append(query)
            return self.combobox
        return self._resolve(query)

    def press_key(self, key: str) -> None:
        self.keys.append(key)
        self.combobox.press(key)

    def _resolve(self, key: str) -> FakeElement:
        self.resolutions.append(key)
        element = MissingElement(key) if key in self.missing else FakeElement(key)
        self.elements[key] = element
        return element


@pytest.fixture(autouse=True)
def detach_run_handlers():
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, "signup_check_run", None) is not None:
            package_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def fake_sign_up_page(fake_driver: FakeDriver) -> SignUpPage:
    return SignUpPage(fake_driver)


@dataclass
class StubRegistrationServer:
    """Serves the sign-up fixture and answers the registration call."""

    html: str
    status: int = 200
    bodies: List[dict] = field(default_factory=list)

    def handle(self, route) -> None:
        request = route.request
        if "registration/register" in request.url:
            self.bodies.append(json.loads(request.post_data or "{}"))
            route.fulfill(
                status=self.status,
                content_type="application/json",
                body=json.dumps({"ok": self.status < 400}),
            )
            return
        route.fulfill(status=200, content_type="text/html", body=self.html)

    def install(self, page) -> None:
        page.route(f"{FIXTURE_BASE_URL}**", self.handle)


@pytest.fixture(scope="session")
def sign_up_html() -> str:
    if not SIGN_UP_HTML_PATH.exists():
        pytest.fail(f"Sign-up fixture missing at {SIGN_UP_HTML_PATH}")
    return SIGN_UP_HTML_PATH.read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def require_chromium() -> None:
    try:
        with BrowserSession(BrowserConfig()):
            pass
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"Chromium is not available: {exc}")


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(base_url=FIXTURE_BASE_URL)


@pytest.fixture
def stub_server(sign_up_html: str) -> StubRegistrationServer:
    return StubRegistrationServer(html=sign_up_html)


@pytest.fixture
def browser_session(require_chromium):
    with BrowserSession(BrowserConfig(action_timeout_ms=3000)) as session:
        yield session


@pytest.fixture
def page(browser_session: BrowserSession, stub_server: StubRegistrationServer, site: SiteConfig):
    stub_server.install(browser_session.page)
    return open_sign_up_page(browser_session.page, site)


@pytest.fixture
def sign_up_page(page) -> SignUpPage:
    return SignUpPage(PlaywrightDriver(page))
