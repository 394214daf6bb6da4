"""Constants for Doctor model field names"""


class DoctorFields:
    """Field name constants for Doctor model"""
    ID = "id"
    RCM = "rcm"
    NAME = "name"
    SPECIALTIES = "specialties"
    PHONE_NUMBER = "phone_number"
    WORKING_HOURS = "working_hours"
    
    # Fields a doctor update may change
    UPDATABLE = (NAME, RCM, SPECIALTIES, PHONE_NUMBER)
