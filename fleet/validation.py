# fleet/validation.py
"""Field rules for drivers and vehicles.

Each validator returns every violation it finds, in field order, and never
raises. Callers turn a non-empty result into a ``ValidationFailure``.
"""

import re
from typing import List

from email_validator import EmailNotValidError, validate_email

from fleet.models.driver import DriverModel, LICENSE_TYPES
from fleet.models.vehicle import VehicleModel

PHONE_PATTERN = re.compile(r"((\+|\(|0)?\d{1,3})?((\s|\)|\-))?(\d{10})\Z", re.ASCII)
LICENSE_PATTERN = re.compile(r"[a-zA-Z0-9]{6,11}")
PLATE_PATTERN = re.compile(r"[A-Z]{3}-\w{4}", re.ASCII)

MIN_NAME_LENGTH = 3
# The first automobile was built in 1886
FIRST_CAR_YEAR = 1886


def _is_mailbox(value: str) -> bool:
    # Syntax only: display names and quoted local parts are allowed, dotless
    # and .test domains too, and nothing is looked up in DNS
    try:
        validate_email(
            value,
            allow_display_name=True,
            allow_quoted_local=True,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def validate_driver(driver: DriverModel) -> List[str]:
    violations = []

    if len(driver.name) < MIN_NAME_LENGTH:
        violations.append("driver name is invalid")
    if len(driver.last_name) < MIN_NAME_LENGTH:
        violations.append("driver last name is invalid")
    if not _is_mailbox(driver.email):
        violations.append("driver email is invalid")
    if not PHONE_PATTERN.search(driver.phone):
        violations.append("driver phone is invalid")
    if not LICENSE_PATTERN.fullmatch(driver.license):
        violations.append("driver license is invalid")
    if driver.license_type not in LICENSE_TYPES:
        violations.append("driver license type is invalid")

    return violations


def validate_vehicle(vehicle: VehicleModel) -> List[str]:
    violations = []

    if len(vehicle.brand) < MIN_NAME_LENGTH:
        violations.append("vehicle brand is invalid")
    if len(vehicle.vehicle_model) < MIN_NAME_LENGTH:
        violations.append("vehicle model is invalid")
    if vehicle.year <= FIRST_CAR_YEAR:
        violations.append("vehicle year is invalid")
    if not PLATE_PATTERN.fullmatch(vehicle.plate):
        violations.append("vehicle plate is invalid")

    return violations
