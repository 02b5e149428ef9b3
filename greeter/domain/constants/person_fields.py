"""Constants for Person model field names"""


class PersonFields:
    """Field name constants for Person model"""
    NAME = "name"
    AGE = "age"
