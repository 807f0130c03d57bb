"""Sign-up scenario orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .browser import BrowserConfig, BrowserSession
from .config import SiteConfig
from .driver import PlaywrightDriver
from .io_utils import RunPaths
from .network_capture import RegistrationPayload, capture_registration_request
from .page_utils import open_sign_up_page
from .registration_evaluator import evaluate_sign_up_result
from .sign_up_data import SignUpData, build_sign_up_data
from .sign_up_page import SignUpPage


@dataclass(slots=True)
class ScenarioInputs:
    site: SiteConfig
    run_paths: RunPaths
    logger: logging.Logger
    data: Optional[SignUpData] = None
    expected_country_code: Optional[str] = None
    browser: BrowserConfig = field(default_factory=BrowserConfig)


def fill_sign_up_form(sign_up_page: SignUpPage, data: SignUpData) -> str:
    """Fill every field and tick both boxes; return the committed country."""
    sign_up_page.add_first_name(data.first_name)
    sign_up_page.add_last_name(data.last_name)
    sign_up_page.add_work_email(data.work_email)
    sign_up_page.add_phone_number(data.phone_number)
    sign_up_page.add_password(data.password)
    sign_up_page.add_company_name(data.company_name)
    sign_up_page.add_information_media(data.information_media)
    country = sign_up_page.select_new_country_value(data.country_query)
    sign_up_page.check_terms_and_conditions()
    sign_up_page.check_receive_updates()
    return country


def complete_sign_up(sign_up_page: SignUpPage, data: SignUpData) -> str:
    country = fill_sign_up_form(sign_up_page, data)
    sign_up_page.click_create_account_button()
    return country


def run_sign_up_scenario(inputs: ScenarioInputs) -> Dict[str, object]:
    logger = inputs.logger
    run_paths = inputs.run_paths
    data = inputs.data or build_sign_up_data()
    artifacts: List[str] = []
    notes: List[str] = []
    status = "failed"
    committed_country: Optional[str] = None
    payload: Optional[RegistrationPayload] = None
    success_message: Optional[str] = None
    validation_message: Optional[str] = None

    try:
        with BrowserSession(inputs.browser) as browser:
            page = open_sign_up_page(browser.page, inputs.site, logger=logger)
            shot = browser.screenshot(run_paths.artifact("00_sign_up.png"))
            artifacts.append(run_paths.relative(shot))

            sign_up_page = SignUpPage(PlaywrightDriver(page), logger=logger)
            committed_country = fill_sign_up_form(sign_up_page, data)
            logger.info(
                "Committed country %r for query %r",
                committed_country,
                data.country_query,
            )

            payload = capture_registration_request(
                page,
                sign_up_page.click_create_account_button,
                url_fragment=inputs.site.registration_path,
            )
            outcome = evaluate_sign_up_result(page, logger=logger)
            status = outcome.status
            success_message = outcome.success_message
            validation_message = outcome.validation_message

            shot = browser.screenshot(run_paths.artifact("01_after_submit.png"))
            artifacts.append(run_paths.relative(shot))

        expected = inputs.expected_country_code
        if expected and payload.country != expected:
            notes.append(
                f"Registration sent country {payload.country!r}, expected {expected!r}"
            )
            status = "country_mismatch"
    except Exception as exc:  # noqa: BLE001
        logger.exception("Sign-up scenario failed: %s", exc)
        notes.append(str(exc))
        status = "error"

    return {
        "run_id": run_paths.run_id,
        "sign_up_url": inputs.site.sign_up_url(),
        "status": status,
        "work_email": data.work_email,
        "country_query": data.country_query,
        "committed_country": committed_country,
        "registration_request": payload.to_dict() if payload else None,
        "country_code": payload.country if payload else None,
        "success_message": success_message,
        "validation_message": validation_message,
        "artifacts": artifacts,
        "notes": " | ".join(notes) if notes else "",
    }


__all__ = [
    "ScenarioInputs",
    "fill_sign_up_form",
    "complete_sign_up",
    "run_sign_up_scenario",
]
