"""Constants for Examination model field names"""


class ExaminationFields:
    """Field name constants for Examination model"""
    ID = "id"
    TYPE = "type"
    RESULT = "result"
    DATE = "date"
    LOCATION = "location"
    PATIENT_ID = "patient_id"
    RESPONSIBLE_DOCTOR_ID = "responsible_doctor_id"
    
    # Patient and doctor links are fixed once scheduled
    UPDATABLE = (TYPE, RESULT, DATE, LOCATION)
