"""Domain constants shared by deterministic rules."""

from pet_travel.domain.enums import Destination

EU_DESTINATIONS = frozenset(
    {
        Destination.PORTUGAL,
        Destination.FINLAND,
        Destination.IRELAND,
        Destination.MALTA,
        Destination.NORWAY,
    }
)
ANTIPARASITIC_DESTINATIONS = frozenset(
    {
        Destination.FINLAND,
        Destination.IRELAND,
        Destination.MALTA,
        Destination.NORWAY,
    }
)

# Vaccination -> titer blood collection, both destination classes.
MIN_DAYS_VACCINE_TO_BLOOD = 30

# EU
EU_DAYS_BLOOD_TO_TRAVEL = 90
EU_CVI_WINDOW_DAYS = 10
EU_GOV_NOTIFICATION_DAYS = 2
ANTIPARASITIC_WINDOW_START_DAYS = 5
ANTIPARASITIC_WINDOW_END_DAYS = 1

# USA
DAYS_PER_MONTH = 30.44
USA_MIN_AGE_MONTHS = 6
USA_MIN_AGE_DAYS = USA_MIN_AGE_MONTHS * DAYS_PER_MONTH
USA_MIN_AGE_AT_VACCINE_DAYS = 90
USA_DAYS_BLOOD_TO_TRAVEL = 28
USA_CFRVM_WINDOW_DAYS = 30
USA_IMPORT_PERMIT_WINDOW_DAYS = 10
USA_HEALTH_CERT_WINDOW_DAYS = 5
USA_CVI_REQUEST_DAYS = 30

# Airport facilities
ATLANTA_FACILITY_DAYS = 60
MIAMI_FACILITY_DAYS = 15
NY_CARGO_MAX_WEIGHT_KG = 9.0
NY_WINTER_START = (12, 15)
NY_WINTER_END = (4, 15)

# Form helper
SUGGESTED_BLOOD_COLLECTION_DAYS = 30
