from email_validator import EmailNotValidError, validate_email


def is_email_valid(candidate) -> bool:
    """Syntax-only email check: local part, "@", and a dotted domain. No DNS lookups."""
    if not isinstance(candidate, str) or not candidate:
        return False
    try:
        # Special-use domains (.test, .local, ...) are syntactically fine
        validated = validate_email(candidate, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return "." in validated.ascii_domain
