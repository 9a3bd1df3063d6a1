"""
Test Data

Literal input records for form fills and API payloads.
"""

# =============================================================================
# Credentials
# =============================================================================

TEST_CREDENTIALS = {
    "valid_user": {
        "username": "John Doe",
        "password": "ThisIsNotAPassword",
    },
    "invalid_user": {
        "username": "InvalidUser",
        "password": "WrongPassword",
    },
    "empty_credentials": {
        "username": "",
        "password": "",
    },
}

SHOP_CREDENTIALS = {
    "standard_user": {
        "username": "standard_user",
        "password": "secret_sauce",
    },
    "locked_out_user": {
        "username": "locked_out_user",
        "password": "secret_sauce",
    },
    "invalid_user": {
        "username": "InvalidUser",
        "password": "WrongPassword",
    },
    "empty_credentials": {
        "username": "",
        "password": "",
    },
}

# =============================================================================
# Appointments (CURA)
# =============================================================================

APPOINTMENT_DATA = {
    "default": {
        "facility": "Seoul CURA Healthcare Center",
        "readmission": True,
        "program": "Medicare",
        "visit_date": "01/01/2025",
        "comment": "Please schedule at your earliest convenience.",
    },
    "alternate": {
        "facility": "Tokyo CURA Healthcare Center",
        "readmission": False,
        "program": "UnitedHealthcare",
        "visit_date": "02/15/2025",
        "comment": "Tokyo appointment request",
    },
    "london": {
        "facility": "London CURA Healthcare Center",
        "readmission": True,
        "program": "Medicaid",
        "visit_date": "03/20/2025",
        "comment": "London facility appointment",
    },
    "facilities": [
        "Seoul CURA Healthcare Center",
        "Tokyo CURA Healthcare Center",
        "London CURA Healthcare Center",
    ],
    "programs": [
        "Medicare",
        "UnitedHealthcare",
        "Medicaid",
    ],
}

# =============================================================================
# Orders (Sauce Labs demo)
# =============================================================================

ORDER_DATA = {
    "default": {
        "items": ["Sauce Labs Backpack"],
        "first_name": "John",
        "last_name": "Doe",
        "postal_code": "10001",
    },
    "multi_item": {
        "items": ["Sauce Labs Backpack", "Sauce Labs Bike Light"],
        "first_name": "Jane",
        "last_name": "Doe",
        "postal_code": "94105",
    },
    "missing_details": {
        "items": ["Sauce Labs Onesie"],
    },
}

ORDER_CONFIRMATION_TEXT = "Thank you for your order!"

# =============================================================================
# Patients (JSONPlaceholder /users)
# =============================================================================

PATIENT_DATA = {
    "new_patient": {
        "name": "John Smith",
        "email": "john.smith@healthcare.com",
        "phone": "555-1234",
        "company": {
            "name": "Healthcare Solutions Inc",
        },
    },
    "updated_patient": {
        "name": "John Smith Updated",
        "email": "john.smith.updated@healthcare.com",
        "phone": "555-5678",
        "company": {
            "name": "Updated Healthcare Inc",
        },
    },
    "alternate_patient": {
        "name": "Jane Doe",
        "email": "jane.doe@healthcare.com",
        "phone": "555-9999",
        "website": "janedoe.health",
        "company": {
            "name": "Jane Healthcare LLC",
            "catchPhrase": "Innovative solutions",
            "bs": "patient-centric",
        },
    },
}

PATIENT_REQUIRED_FIELDS = ["id", "name", "email", "phone"]
PATIENT_DETAIL_FIELDS = PATIENT_REQUIRED_FIELDS + ["username", "address", "company"]
