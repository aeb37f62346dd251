from typing import Literal, get_args

OSRMProfile = Literal['car', 'bike', 'foot', 'driving']
OSRMProfiles: frozenset[OSRMProfile] = frozenset(get_args(OSRMProfile))
