"""
Constants for the merchant profile import.

This file contains the data-set keys, table column groups and publish event
names used throughout the import so they stay consistent.
"""

# Data-set keys
ID_MERCHANT = "id_merchant"
LOCALIZED_ATTRIBUTES = "localized_attributes"

# Merchant profile scalar fields
CONTACT_PERSON_ROLE = "contact_person_role"
CONTACT_PERSON_TITLE = "contact_person_title"
CONTACT_PERSON_FIRST_NAME = "contact_person_first_name"
CONTACT_PERSON_LAST_NAME = "contact_person_last_name"
CONTACT_PERSON_PHONE = "contact_person_phone"
LOGO_URL = "logo_url"
PUBLIC_EMAIL = "public_email"
PUBLIC_PHONE = "public_phone"
FAX_NUMBER = "fax_number"
IS_ACTIVE = "is_active"

# Localized fields stored as glossary keys on the profile
DESCRIPTION_GLOSSARY_KEY = "description_glossary_key"
BANNER_URL_GLOSSARY_KEY = "banner_url_glossary_key"
DELIVERY_TIME_GLOSSARY_KEY = "delivery_time_glossary_key"
TERMS_CONDITIONS_GLOSSARY_KEY = "terms_conditions_glossary_key"
CANCELLATION_POLICY_GLOSSARY_KEY = "cancellation_policy_glossary_key"
IMPRINT_GLOSSARY_KEY = "imprint_glossary_key"
DATA_PRIVACY_GLOSSARY_KEY = "data_privacy_glossary_key"

# Reserved localized attribute holding the profile URL
URL = "url"

REQUIRED_DATA_SET_KEYS = (ID_MERCHANT,)

PROFILE_SCALAR_FIELDS = (
    CONTACT_PERSON_ROLE,
    CONTACT_PERSON_TITLE,
    CONTACT_PERSON_FIRST_NAME,
    CONTACT_PERSON_LAST_NAME,
    CONTACT_PERSON_PHONE,
    LOGO_URL,
    PUBLIC_EMAIL,
    PUBLIC_PHONE,
    FAX_NUMBER,
    IS_ACTIVE,
)

PROFILE_GLOSSARY_FIELDS = (
    DESCRIPTION_GLOSSARY_KEY,
    BANNER_URL_GLOSSARY_KEY,
    DELIVERY_TIME_GLOSSARY_KEY,
    TERMS_CONDITIONS_GLOSSARY_KEY,
    CANCELLATION_POLICY_GLOSSARY_KEY,
    IMPRINT_GLOSSARY_KEY,
    DATA_PRIVACY_GLOSSARY_KEY,
)

# Glossary key defaults
DEFAULT_GLOSSARY_KEY_PREFIX = "merchant"

# Publish event names
MERCHANT_PROFILE_PUBLISH = "Entity.merchant_profile.publish"
GLOSSARY_KEY_PUBLISH = "Glossary.key.publish"
URL_PUBLISH = "Url.url.publish"
