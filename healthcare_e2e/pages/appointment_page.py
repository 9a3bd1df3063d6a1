"""
Appointment Page Objects

The appointment form and the confirmation view shown after booking.
"""
from typing import Any, Dict

from ..config import SELECTORS
from ..helpers import book_appointment
from .base_page import BasePage

FORM = SELECTORS["appointment"]
CONFIRMATION = SELECTORS["confirmation"]


class AppointmentPage(BasePage):
    """Page object for the Make Appointment form."""

    FACILITY_DROPDOWN = FORM["facility_dropdown"]
    READMISSION_CHECKBOX = FORM["readmission_checkbox"]
    PROGRAM_RADIOS = FORM["program_radio_buttons"]
    VISIT_DATE_INPUT = FORM["visit_date_input"]
    COMMENT_TEXTAREA = FORM["comment_textarea"]
    BOOK_BUTTON = FORM["book_button"]
    HEADER = SELECTORS["headers"]["appointment_header"]

    def navigate(self) -> "AppointmentPage":
        """Open the appointment form (requires an authenticated session)."""
        self.goto(self.app_config["appointment_path"])
        return self

    def book(self, appointment_data: Dict[str, Any]) -> "ConfirmationPage":
        """Fill and submit the form."""
        book_appointment(self.page, appointment_data)
        return ConfirmationPage(self.page, self.base_url)

    def program_count(self) -> int:
        """Number of program radio buttons."""
        return self.count(self.PROGRAM_RADIOS)

    # Assertions
    def expect_loaded(self) -> None:
        """Assert the form header is visible."""
        self.expect_visible(self.HEADER)

    def expect_form_usable(self) -> None:
        """Assert every form control is present and interactive."""
        self.expect_enabled(self.FACILITY_DROPDOWN)
        self.expect_visible(self.READMISSION_CHECKBOX)
        self.expect_enabled(self.VISIT_DATE_INPUT)
        self.expect_enabled(self.COMMENT_TEXTAREA)
        self.expect_enabled(self.BOOK_BUTTON)


class ConfirmationPage(BasePage):
    """Page object for the Appointment Confirmation view."""

    HEADER = CONFIRMATION["header"]
    FACILITY = CONFIRMATION["facility"]
    READMISSION = CONFIRMATION["readmission"]
    PROGRAM = CONFIRMATION["program"]
    VISIT_DATE = CONFIRMATION["visit_date"]
    COMMENT = CONFIRMATION["comment"]

    def details(self) -> Dict[str, str]:
        """Rendered confirmation values."""
        return {
            "facility": self.get_text(self.FACILITY),
            "readmission": self.get_text(self.READMISSION),
            "program": self.get_text(self.PROGRAM),
            "visit_date": self.get_text(self.VISIT_DATE),
            "comment": self.get_text(self.COMMENT),
        }

    # Assertions
    def expect_displayed(self) -> None:
        """Assert the confirmation header is visible."""
        self.expect_visible(self.HEADER)

    def expect_contains(self, *texts: str) -> None:
        """Assert the rendered page contains every given string."""
        self.expect_displayed()
        html = self.content()
        missing = [text for text in texts if text not in html]
        assert not missing, f"Confirmation is missing: {', '.join(missing)}"
