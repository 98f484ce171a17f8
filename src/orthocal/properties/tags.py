"""
orthocal.properties.tags
------------------------
Numeric property tags attached to the days of a liturgical year.

Tags are grouped by range:

    1..130      movable days (Pascha cycle)
    1001..1072  fixed days
    2001..2032  other computed days
    3001..3003  feast classes
    4001..4009  fasts and continuous weeks
    5001..5025  movable days of Theotokos icons
    6001..6047  movable days of saints and councils
"""

from __future__ import annotations

from typing import Dict, Tuple


# ---------------------------------------------------------
# Movable days
# ---------------------------------------------------------
pasha = 1
svetlaya1 = 2
svetlaya2 = 3
svetlaya3 = 4
svetlaya4 = 5
svetlaya5 = 6
svetlaya6 = 7
ned2_popashe = 8
s2popashe_1 = 9
s2popashe_2 = 10
s2popashe_3 = 11
s2popashe_4 = 12
s2popashe_5 = 13
s2popashe_6 = 14
ned3_popashe = 15
s3popashe_1 = 16
s3popashe_2 = 17
s3popashe_3 = 18
s3popashe_4 = 19
s3popashe_5 = 20
s3popashe_6 = 21
ned4_popashe = 22
s4popashe_1 = 23
s4popashe_2 = 24
s4popashe_3 = 25
s4popashe_4 = 26
s4popashe_5 = 27
s4popashe_6 = 28
ned5_popashe = 29
s5popashe_1 = 30
s5popashe_2 = 31
s5popashe_3 = 32
s5popashe_4 = 33
s5popashe_5 = 34
s5popashe_6 = 35
ned6_popashe = 36
s6popashe_1 = 37
s6popashe_2 = 38
s6popashe_3 = 39
s6popashe_4 = 40
s6popashe_5 = 41
s6popashe_6 = 42
ned7_popashe = 43
s7popashe_1 = 44
s7popashe_2 = 45
s7popashe_3 = 46
s7popashe_4 = 47
s7popashe_5 = 48
s7popashe_6 = 49
ned8_popashe = 50
s1po50_1 = 51
s1po50_2 = 52
s1po50_3 = 53
s1po50_4 = 54
s1po50_5 = 55
s1po50_6 = 56
ned1_po50 = 57
ned2_po50 = 58
ned3_po50 = 59
ned4_po50 = 60
sub_pered14sent = 61
ned_pered14sent = 62
sub_po14sent = 63
ned_po14sent = 64
sobor_otcev7sobora = 65
sub_dmitry = 66
ned_praotec = 67
sub_peredrojd = 68
ned_peredrojd = 69
sub_porojdestve = 70
ned_porojdestve = 71
ned_mitar_ifaris = 72
ned_obludnom = 73
sub_myasopust = 74
ned_myasopust = 75
sirnaya1 = 76
sirnaya2 = 77
sirnaya3 = 78
sirnaya4 = 79
sirnaya5 = 80
sirnaya6 = 81
ned_siropust = 82
vel_post_d1n1 = 83
vel_post_d2n1 = 84
vel_post_d3n1 = 85
vel_post_d4n1 = 86
vel_post_d5n1 = 87
vel_post_d6n1 = 88
vel_post_d0n2 = 89
vel_post_d1n2 = 90
vel_post_d2n2 = 91
vel_post_d3n2 = 92
vel_post_d4n2 = 93
vel_post_d5n2 = 94
vel_post_d6n2 = 95
vel_post_d0n3 = 96
vel_post_d1n3 = 97
vel_post_d2n3 = 98
vel_post_d3n3 = 99
vel_post_d4n3 = 100
vel_post_d5n3 = 101
vel_post_d6n3 = 102
vel_post_d0n4 = 103
vel_post_d1n4 = 104
vel_post_d2n4 = 105
vel_post_d3n4 = 106
vel_post_d4n4 = 107
vel_post_d5n4 = 108
vel_post_d6n4 = 109
vel_post_d0n5 = 110
vel_post_d1n5 = 111
vel_post_d2n5 = 112
vel_post_d3n5 = 113
vel_post_d4n5 = 114
vel_post_d5n5 = 115
vel_post_d6n5 = 116
vel_post_d0n6 = 117
vel_post_d1n6 = 118
vel_post_d2n6 = 119
vel_post_d3n6 = 120
vel_post_d4n6 = 121
vel_post_d5n6 = 122
vel_post_d6n6 = 123
vel_post_d0n7 = 124
vel_post_d1n7 = 125
vel_post_d2n7 = 126
vel_post_d3n7 = 127
vel_post_d4n7 = 128
vel_post_d5n7 = 129
vel_post_d6n7 = 130

# ---------------------------------------------------------
# Fixed days
# ---------------------------------------------------------
m1d1 = 1001
m1d2 = 1002
m1d3 = 1003
m1d4 = 1004
m1d5 = 1005
m1d6 = 1006
m1d7 = 1007
m1d8 = 1008
m1d9 = 1009
m1d10 = 1010
m1d11 = 1011
m1d12 = 1012
m1d13 = 1013
m1d14 = 1014
m3d25 = 1015
m6d24 = 1016
m6d25 = 1017
m6d29 = 1018
m8d5 = 1019
m8d6 = 1020
m8d7 = 1021
m8d8 = 1022
m8d9 = 1023
m8d10 = 1024
m8d11 = 1025
m8d12 = 1026
m8d13 = 1027
m8d14 = 1028
m8d15 = 1029
m8d16 = 1030
m8d17 = 1031
m8d18 = 1032
m8d19 = 1033
m8d20 = 1034
m8d21 = 1035
m8d22 = 1036
m8d23 = 1037
m9d7 = 1038
m9d8 = 1039
m9d9 = 1040
m9d10 = 1041
m9d11 = 1042
m9d12 = 1043
m9d13 = 1044
m9d14 = 1045
m9d15 = 1046
m9d16 = 1047
m9d17 = 1048
m9d18 = 1049
m9d19 = 1050
m9d20 = 1051
m9d21 = 1052
m8d29 = 1053
m10d1 = 1054
m11d20 = 1055
m11d21 = 1056
m11d22 = 1057
m11d23 = 1058
m11d24 = 1059
m11d25 = 1060
m12d20 = 1061
m12d21 = 1062
m12d22 = 1063
m12d23 = 1064
m12d24 = 1065
m12d25 = 1066
m12d26 = 1067
m12d27 = 1068
m12d28 = 1069
m12d29 = 1070
m12d30 = 1071
m12d31 = 1072

# ---------------------------------------------------------
# Other computed days
# ---------------------------------------------------------
sub_peredbogoyav = 2001
ned_peredbogoyav = 2002
sub_pobogoyav = 2003
ned_pobogoyav = 2004
sobor_novom_rus = 2005
sobor_3sv = 2006
sretenie_predpr = 2007
sretenie = 2008
sretenie_poprazd1 = 2009
sretenie_poprazd2 = 2010
sretenie_poprazd3 = 2011
sretenie_poprazd4 = 2012
sretenie_poprazd5 = 2013
sretenie_poprazd6 = 2014
sretenie_otdanie = 2015
obret_gl_ioanna12 = 2016
muchenik_40 = 2017
blag_predprazd = 2018
blag_otdanie = 2019
georgia_pob = 2020
obret_gl_ioanna3 = 2021
sobor_otcev_1_6sob = 2022
feodor_tir = 2023
grigor_palam = 2024
ioann_lestv = 2025
mari_egipt = 2026
sub_porojdestve_r = 2027
ned_porojdestve_r = 2028
sub_peredbogoyav_r = 2029
ned_peredbogoyav_r = 2030
ned_prav_bogootec = 2031
sobor_vsehsv_rus = 2032

# ---------------------------------------------------------
# Feast classes
# ---------------------------------------------------------
dvana10_per_prazd = 3001
dvana10_nep_prazd = 3002
vel_prazd = 3003

# ---------------------------------------------------------
# Fasts and continuous weeks
# ---------------------------------------------------------
post_vel = 4001
post_petr = 4002
post_usp = 4003
post_rojd = 4004
full7_svyatki = 4005
full7_mitar = 4006
full7_sirn = 4007
full7_pasha = 4008
full7_troica = 4009

# ---------------------------------------------------------
# Theotokos icons
# ---------------------------------------------------------
mari_icon_01 = 5001
mari_icon_02 = 5002
mari_icon_03 = 5003
mari_icon_04 = 5004
mari_icon_05 = 5005
mari_icon_06 = 5006
mari_icon_07 = 5007
mari_icon_08 = 5008
mari_icon_09 = 5009
mari_icon_10 = 5010
mari_icon_11 = 5011
mari_icon_12 = 5012
mari_icon_13 = 5013
mari_icon_14 = 5014
mari_icon_15 = 5015
mari_icon_16 = 5016
mari_icon_17 = 5017
mari_icon_18 = 5018
mari_icon_19 = 5019
mari_icon_20 = 5020
mari_icon_21 = 5021
mari_icon_22 = 5022
mari_icon_23 = 5023
mari_icon_24 = 5024
mari_icon_25 = 5025

# ---------------------------------------------------------
# Saints and councils
# ---------------------------------------------------------
sobor_valaam = 6001
varlaam_hut = 6002
petr_fevron_murom = 6003
sobor_bessrebren = 6004
sobor_tversk = 6005
sobor_kuzbas = 6006
pahomii_kensk = 6007
shio_mg = 6008
prep_dav_gar = 6009
hristodul = 6010
iosif_arimaf = 6011
tamar_gruz = 6012
pm_avraam_bolg = 6013
tavif = 6014
much_fereidan = 6015
dodo_gar = 6016
david_gar = 6017
prep_sokolovsk = 6018
arsen_tversk = 6019
much_lipsiisk = 6020
sobor_altai = 6021
sobor_afonpr = 6022
sobor_belorus = 6023
sobor_vologod = 6024
sobor_novgorod = 6025
sobor_pskov = 6026
sobor_piter = 6027
sobor_udmurt = 6028
sobor_volgograd = 6029
sobor_ispan = 6030
sobor_kuban = 6031
sobor_chelyab = 6032
sobor_mosk = 6033
sobor_nnovgor = 6034
sobor_saratov = 6035
sobor_butov = 6036
sobor_kazahst = 6037
sobor_karel = 6038
sobor_perm = 6039
sobor_ppech_prep = 6040
sobor_sinai_prep = 6041
sobor_much_holm = 6042
sobor_vseh_prep = 6043
sobor_kpech_prep = 6044
sobor_smolensk = 6045
sobor_alansk = 6046
sobor_german = 6047


# ---------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------

RANGES: Dict[str, Tuple[int, int]] = {
    "movable": (1, 130),
    "fixed": (1001, 1072),
    "other": (2001, 2032),
    "feast_class": (3001, 3003),
    "fast": (4001, 4009),
    "icon": (5001, 5025),
    "saint": (6001, 6047),
}

BY_NAME: Dict[str, int] = {
    k: v for k, v in dict(globals()).items()
    if not k.startswith("_") and isinstance(v, int)
}

BY_VALUE: Dict[int, str] = {v: k for k, v in BY_NAME.items()}


def tag_by_name(name: str) -> int:
    """Resolve a tag from its constant name or its decimal value."""
    s = name.strip()
    if s.isdigit():
        v = int(s)
        if v not in BY_VALUE:
            raise KeyError(f"Unknown property tag {v}")
        return v
    if s not in BY_NAME:
        raise KeyError(f"Unknown property tag '{name}'")
    return BY_NAME[s]


def tag_name(tag: int) -> str:
    return BY_VALUE.get(tag, "")


def tag_group(tag: int) -> str:
    """Range name for a tag, or '' when it falls outside every range."""
    for group, (lo, hi) in RANGES.items():
        if lo <= tag <= hi:
            return group
    return ""
