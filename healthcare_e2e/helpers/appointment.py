"""
Appointment Helper

Fills and submits the healthcare appointment form.
"""
import logging
from typing import Any, Dict

from playwright.sync_api import Page

from ..config import SELECTORS
from .exceptions import HelperError

logger = logging.getLogger(__name__)

FORM = SELECTORS["appointment"]


def program_radio_index(program: str) -> int:
    """Radio index for a program: Medicare is the first option, anything else the second."""
    return 0 if program == "Medicare" else 1


def book_appointment(page: Page, appointment_data: Dict[str, Any]) -> None:
    """
    Book an appointment with the provided details.

    Each field is only touched when present in ``appointment_data``;
    values are passed to the page as-is.

    Args:
        page: Playwright page showing the appointment form
        appointment_data: Dict with optional keys facility, readmission,
            program, visit_date, comment

    Raises:
        HelperError: If any step fails
    """
    try:
        if appointment_data.get("facility"):
            page.select_option(FORM["facility_dropdown"], appointment_data["facility"])

        if appointment_data.get("readmission"):
            page.check(FORM["readmission_checkbox"])

        if appointment_data.get("program"):
            index = program_radio_index(appointment_data["program"])
            page.locator(FORM["program_radio_buttons"]).nth(index).check()

        if appointment_data.get("visit_date"):
            page.fill(FORM["visit_date_input"], appointment_data["visit_date"])

        if appointment_data.get("comment"):
            page.fill(FORM["comment_textarea"], appointment_data["comment"])

        page.click(FORM["book_button"])
        page.wait_for_load_state("networkidle")
    except Exception as e:
        raise HelperError(f"Booking appointment failed: {e}") from e

    logger.info(f"Appointment submitted for {appointment_data.get('facility', 'default facility')}")
