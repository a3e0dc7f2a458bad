"""
Centralized configuration for the delivery distance and fee engine.
All tunable constants and settings are defined here.
"""

import math
import os

# Geocoding service (Nominatim-compatible search endpoint)
GEOCODER_URL: str = os.environ.get("GEOCODER_URL", "https://nominatim.openstreetmap.org/search")

# Nominatim's usage policy requires an identifying User-Agent
GEOCODER_USER_AGENT: str = os.environ.get("GEOCODER_USER_AGENT", "ICN_FREEZE/1.0 (contact)")

# Appended to every free-text query to keep matches inside the shipping country
GEOCODER_COUNTRY: str = os.environ.get("GEOCODER_COUNTRY", "Thailand")

# Outbound request timeout in seconds. None disables the timeout entirely;
# callers are expected to bound the whole checkout request themselves.
_timeout_env = os.environ.get("GEOCODER_TIMEOUT_S")
GEOCODER_TIMEOUT_S: float | None = float(_timeout_env) if _timeout_env else None

# Great-circle distance
EARTH_RADIUS_KM: float = 6371.0
EARTH_RADIUS_MI: float = 3958.8

# Delivery fees, in currency minor units (satang)
CURRENCY: str = "thb"
DELIVERY_BASE_FEE: int = 2000

# Distance tiers: (name, upper bound in km, surcharge in minor units).
# Ordered by upper bound; the last tier must be unbounded.
FEE_TIERS: list[tuple[str, float, int]] = [
    ("near", 150.0, 0),
    ("medium", 400.0, 1000),
    ("far", math.inf, 2000),
]

# Delivery lead times in days per shipping method and tier: (min_days, max_days)
DELIVERY_DAYS: dict[str, dict[str, tuple[int, int]]] = {
    "standard": {"near": (5, 5), "medium": (6, 6), "far": (7, 7)},
    "express": {"near": (1, 1), "medium": (1, 2), "far": (1, 2)},
}

# Static province lookup table - provincial capitals, (latitude, longitude)
PROVINCE_COORDINATES: dict[str, tuple[float, float]] = {
    "Bangkok": (13.7563, 100.5018),
    "Amnat Charoen": (15.8657, 104.6258),
    "Ang Thong": (14.5896, 100.4550),
    "Bueng Kan": (18.3609, 103.6466),
    "Buriram": (14.9930, 103.1029),
    "Chachoengsao": (13.6904, 101.0780),
    "Chai Nat": (15.1852, 100.1251),
    "Chaiyaphum": (15.8068, 102.0316),
    "Chanthaburi": (12.6114, 102.1039),
    "Chiang Mai": (18.7883, 98.9853),
    "Chiang Rai": (19.9105, 99.8406),
    "Chonburi": (13.3611, 100.9847),
    "Chumphon": (10.4930, 99.1800),
    "Kalasin": (16.4314, 103.5059),
    "Kamphaeng Phet": (16.4828, 99.5227),
    "Kanchanaburi": (14.0228, 99.5328),
    "Khon Kaen": (16.4322, 102.8236),
    "Krabi": (8.0863, 98.9063),
    "Lampang": (18.2888, 99.4909),
    "Lamphun": (18.5745, 99.0087),
    "Loei": (17.4860, 101.7223),
    "Lopburi": (14.7995, 100.6534),
    "Mae Hong Son": (19.3020, 97.9654),
    "Maha Sarakham": (16.1851, 103.3029),
    "Mukdahan": (16.5420, 104.7235),
    "Nakhon Nayok": (14.2069, 101.2131),
    "Nakhon Pathom": (13.8199, 100.0621),
    "Nakhon Phanom": (17.3920, 104.7695),
    "Nakhon Ratchasima": (14.9799, 102.0978),
    "Nakhon Sawan": (15.7047, 100.1372),
    "Nakhon Si Thammarat": (8.4304, 99.9631),
    "Nan": (18.7756, 100.7730),
    "Narathiwat": (6.4255, 101.8253),
    "Nong Bua Lamphu": (17.2218, 102.4260),
    "Nong Khai": (17.8783, 102.7420),
    "Nonthaburi": (13.8621, 100.5144),
    "Pathum Thani": (14.0208, 100.5250),
    "Pattani": (6.8696, 101.2501),
    "Phang Nga": (8.4501, 98.5255),
    "Phatthalung": (7.6167, 100.0740),
    "Phayao": (19.1666, 99.9019),
    "Phetchabun": (16.4190, 101.1606),
    "Phetchaburi": (13.1119, 99.9398),
    "Phichit": (16.4398, 100.3489),
    "Phitsanulok": (16.8211, 100.2659),
    "Phra Nakhon Si Ayutthaya": (14.3532, 100.5689),
    "Phrae": (18.1446, 100.1403),
    "Phuket": (7.8804, 98.3923),
    "Prachinburi": (14.0509, 101.3717),
    "Prachuap Khiri Khan": (11.8124, 99.7973),
    "Ranong": (9.9529, 98.6085),
    "Ratchaburi": (13.5283, 99.8134),
    "Rayong": (12.6814, 101.2816),
    "Roi Et": (16.0538, 103.6520),
    "Sa Kaeo": (13.8240, 102.0646),
    "Sakon Nakhon": (17.1545, 104.1348),
    "Samut Prakan": (13.5991, 100.5998),
    "Samut Sakhon": (13.5475, 100.2744),
    "Samut Songkhram": (13.4098, 100.0023),
    "Saraburi": (14.5289, 100.9101),
    "Satun": (6.6238, 100.0674),
    "Sing Buri": (14.8936, 100.3967),
    "Sisaket": (15.1186, 104.3220),
    "Songkhla": (7.1898, 100.5954),
    "Sukhothai": (17.0078, 99.8265),
    "Suphan Buri": (14.4745, 100.1177),
    "Surat Thani": (9.1382, 99.3217),
    "Surin": (14.8818, 103.4936),
    "Tak": (16.8840, 99.1258),
    "Trang": (7.5563, 99.6114),
    "Trat": (12.2428, 102.5175),
    "Ubon Ratchathani": (15.2448, 104.8473),
    "Udon Thani": (17.4138, 102.7870),
    "Uthai Thani": (15.3835, 100.0246),
    "Uttaradit": (17.6201, 100.0993),
    "Yala": (6.5411, 101.2804),
    "Yasothon": (15.7926, 104.1453),
}
