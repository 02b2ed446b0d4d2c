"""Personal codes used across the test suite, with ages as of REFERENCE_DATE"""

from datetime import date

REFERENCE_DATE = date(2025, 3, 1)

# Age 18, segment 3
YOUNG_PERSONAL_CODE = "50701017921"
# Age 35, segment 1
MID_PERSONAL_CODE = "49002012785"
# Age 54, segment 1
SENIOR_PERSONAL_CODE = "37005032808"
# Age 70, segment 2
TOO_OLD_PERSONAL_CODE = "35502016670"
# Debtor
DEBTOR_PERSONAL_CODE = "50307170158"
# Age 39, segment 2
SEGMENT_2_PERSONAL_CODE = "48506156000"
# Age 45, segment 3
SEGMENT_3_PERSONAL_CODE = "38001018007"
# Age 25, segment 1
YOUNG_ADULT_PERSONAL_CODE = "50001013008"
