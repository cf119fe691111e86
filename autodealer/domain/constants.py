# autodealer/domain/constants.py
#shared by the table CHECKs and the request schemas
MIN_YEAR = 1990
MAX_YEAR = 2024
VIN_LENGTH = 17
