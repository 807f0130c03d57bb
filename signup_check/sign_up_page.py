"""Page object for the account sign-up form."""

from __future__ import annotations

import logging
from typing import Optional

from .autocomplete import CountryAutocomplete
from .driver import Driver

LOGGER = logging.getLogger(__name__)

FIRST_NAME_LABEL = "First name"
LAST_NAME_LABEL = "Last name"
WORK_EMAIL_LABEL = "Work e-mail"
PHONE_NUMBER_LABEL = "Phone number"
COMPANY_NAME_LABEL = "Company name"
INFORMATION_MEDIA_LABEL = "How did you hear about us?"

PASSWORD_QUERY = 'input[name="password"]'
COUNTRY_QUERY = "#registration-country-input"
TERMS_QUERY = 'label:has(input[name="acceptTos"]) input[name="acceptTos"]'
RECEIVE_UPDATES_QUERY = "label:has-text(\"I'm happy to receive very\")"
CREATE_ACCOUNT_QUERY = 'text="Create an account"'


class SignUpPage:
    """Semantic operations over the sign-up form.

    Every field is resolved once here and reused for the lifetime of the
    instance. Failures surface as ``ElementResolutionError`` from the driver
    and are never retried.
    """

    def __init__(self, driver: Driver, *, logger: Optional[logging.Logger] = None) -> None:
        self.driver = driver
        self.logger = logger or LOGGER
        self.first_name = driver.resolve_by_semantic_label(FIRST_NAME_LABEL)
        self.last_name = driver.resolve_by_semantic_label(LAST_NAME_LABEL)
        self.work_email = driver.resolve_by_semantic_label(WORK_EMAIL_LABEL)
        self.phone_number = driver.resolve_by_semantic_label(PHONE_NUMBER_LABEL)
        self.user_password = driver.resolve_by_structural_query(PASSWORD_QUERY)
        self.company_name = driver.resolve_by_semantic_label(COMPANY_NAME_LABEL)
        self.country_dropdown = driver.resolve_by_structural_query(COUNTRY_QUERY)
        self.information_media = driver.resolve_by_semantic_label(INFORMATION_MEDIA_LABEL)
        self.terms_and_conditions_check = driver.resolve_by_structural_query(TERMS_QUERY)
        self.receive_updates_check = driver.resolve_by_structural_query(
            RECEIVE_UPDATES_QUERY
        )
        self.create_account_button = driver.resolve_by_structural_query(
            CREATE_ACCOUNT_QUERY
        )
        self.country_autocomplete = CountryAutocomplete(
            driver, self.country_dropdown, logger=self.logger
        )

    def add_first_name(self, first_name: str) -> None:
        self.first_name.fill(first_name)
        self.logger.debug("Filled first name")

    def add_last_name(self, last_name: str) -> None:
        self.last_name.fill(last_name)
        self.logger.debug("Filled last name")

    def add_work_email(self, work_email: str) -> None:
        self.work_email.fill(work_email)
        self.logger.debug("Filled work e-mail with %s", work_email)

    def add_phone_number(self, phone_number: str) -> None:
        self.phone_number.fill(phone_number)
        self.logger.debug("Filled phone number")

    def add_password(self, password_value: str) -> None:
        self.user_password.fill(password_value)
        self.logger.debug("Filled password")

    def add_company_name(self, company_name: str) -> None:
        self.company_name.fill(company_name)
        self.logger.debug("Filled company name")

    def add_information_media(self, info_media: str) -> None:
        self.information_media.fill(info_media)
        self.logger.debug("Filled information media")

    def search_new_country_value(self, country: str) -> str:
        """Return the text of the country option highlighted for ``country``.

        Nothing is selected. Raises ``NoCandidateResolvedError`` when the
        query highlights no option.
        """
        return self.country_autocomplete.search(country)

    def select_new_country_value(self, country: str) -> str:
        """Select the first country option matching ``country`` and return the input value."""
        return self.country_autocomplete.commit(country)

    def check_terms_and_conditions(self) -> None:
        # The native checkbox sits under a styled label and is never "visible".
        self.terms_and_conditions_check.check(force=True)
        self.logger.debug("Accepted terms and conditions")

    def check_receive_updates(self) -> None:
        self.receive_updates_check.click()
        self.logger.debug("Opted in to updates")

    def click_create_account_button(self) -> None:
        self.create_account_button.click()
        self.logger.debug("Clicked create account")


__all__ = ["SignUpPage"]
