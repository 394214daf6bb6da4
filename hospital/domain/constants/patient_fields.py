"""Constants for Patient model field names"""


class PatientFields:
    """Field name constants for Patient model"""
    ID = "id"
    NAME = "name"
    IDENTIFICATION_DOCUMENT = "identification_document"
    DATE_OF_BIRTH = "date_of_birth"
    GENDER = "gender"
    BLOOD_TYPE = "blood_type"
    ADDRESS = "address"
    PHONE_NUMBER = "phone_number"
    EMAIL = "email"
    EMERGENCY_CONTACT = "emergency_contact"
    ALLERGIES = "allergies"
    MEDICAL_RECORD = "medical_record"
    
    # Fields a patient update may change; allergies and the record have their own operations
    UPDATABLE = (
        NAME,
        IDENTIFICATION_DOCUMENT,
        DATE_OF_BIRTH,
        GENDER,
        BLOOD_TYPE,
        ADDRESS,
        PHONE_NUMBER,
        EMAIL,
        EMERGENCY_CONTACT,
    )
