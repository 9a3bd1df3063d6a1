"""
Page Selectors

CSS/text selectors for the two target websites. These are external,
uncontrolled interfaces; update them here when the sites change.
"""

# =============================================================================
# Healthcare App (CURA)
# =============================================================================

SELECTORS = {
    "navigation": {
        "menu_toggle": "a#menu-toggle",
        "sidebar_open": "#sidebar-wrapper.active",
        "login_link": 'a[href="profile.php#login"]',
        "logout_link": 'a:has-text("Logout")',
    },
    "login": {
        "username_input": "input#txt-username",
        "password_input": "input#txt-password",
        "login_button": "button#btn-login",
        "error_message": "p.text-danger, div.alert-danger",
    },
    "appointment": {
        "facility_dropdown": "select#combo_facility",
        "readmission_checkbox": "input#chk_hospotal_readmission",
        "program_radio_buttons": 'input[name="programs"]',
        "visit_date_input": "input#txt_visit_date",
        "comment_textarea": "textarea#txt_comment",
        "book_button": "button#btn-book-appointment",
    },
    "confirmation": {
        "header": 'h2:has-text("Appointment Confirmation")',
        "facility": "p#facility",
        "readmission": "p#hospital_readmission",
        "program": "p#program",
        "visit_date": "p#visit_date",
        "comment": "p#comment",
    },
    "headers": {
        "appointment_header": 'h2:has-text("Make Appointment")',
    },
}

# =============================================================================
# E-commerce App (Sauce Labs demo)
# =============================================================================

SHOP_SELECTORS = {
    "login": {
        "username_input": "input#user-name",
        "password_input": "input#password",
        "login_button": "input#login-button",
        "error_message": 'h3[data-test="error"]',
    },
    "menu": {
        "open_button": "button#react-burger-menu-btn",
        "logout_link": "a#logout_sidebar_link",
    },
    "inventory": {
        "title": 'span.title:has-text("Products")',
        "item": "div.inventory_item",
        "item_by_name": 'div.inventory_item:has(div.inventory_item_name:text-is("{name}"))',
        "add_button": 'button:has-text("Add to cart")',
        "cart_link": "a.shopping_cart_link",
        "cart_badge": "span.shopping_cart_badge",
    },
    "cart": {
        "checkout_button": "button#checkout",
    },
    "checkout": {
        "first_name_input": "input#first-name",
        "last_name_input": "input#last-name",
        "postal_code_input": "input#postal-code",
        "continue_button": "input#continue",
        "finish_button": "button#finish",
        "error_message": 'h3[data-test="error"]',
        "complete_header": "h2.complete-header",
    },
}
