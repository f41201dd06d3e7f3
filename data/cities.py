# Bundled stop-over towns on the Kedarnath route
# Same shape as the documents in the Firestore `cities` collection.
# Used when Firestore is not configured or unreachable.
# Order matters: the comparison directory pairs cities in this order.

CITIES = [
    {
        "slug": "haridwar",
        "name": "Haridwar",
        "type": "base_city",
        "state": "Uttarakhand",
        "distance_from_delhi": "220 km",
        "distance_from_kedarnath": "247 km",
        "elevation": "314 m",
        "taxi_rates": {"drop_sonprayag_sedan": 6500, "drop_sonprayag_suv": 8500},
        "stay_vibe": "Ganga aarti, ashrams and busy ghats",
        "avg_hotel_price": "₹1,200 - ₹5,000",
        "images": ["/images/cities/haridwar.jpg"],
        "description": "Gateway to the Char Dham circuit, with the evening aarti at Har Ki Pauri.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (35 km)",
            "nearest_railway": "Haridwar Junction"
        }
    },
    {
        "slug": "rishikesh",
        "name": "Rishikesh",
        "type": "base_city",
        "state": "Uttarakhand",
        "distance_from_delhi": "240 km",
        "distance_from_kedarnath": "223 km",
        "elevation": "372 m",
        "taxi_rates": {"drop_sonprayag_sedan": 6000, "drop_sonprayag_suv": 8000},
        "stay_vibe": "Yoga retreats, cafes and river rafting",
        "avg_hotel_price": "₹1,500 - ₹6,000",
        "images": ["/images/cities/rishikesh.jpg"],
        "description": "Yoga capital on the Ganga and the usual start of the hill drive.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (21 km)",
            "nearest_railway": "Yog Nagari Rishikesh"
        }
    },
    {
        "slug": "dehradun",
        "name": "Dehradun",
        "type": "base_city",
        "state": "Uttarakhand",
        "distance_from_delhi": "250 km",
        "distance_from_kedarnath": "260 km",
        "elevation": "640 m",
        "taxi_rates": {"drop_sonprayag_sedan": 7000, "drop_sonprayag_suv": 9000},
        "stay_vibe": "State capital with malls and business hotels",
        "avg_hotel_price": "₹2,000 - ₹7,000",
        "images": ["/images/cities/dehradun.jpg"],
        "description": "Capital of Uttarakhand with the nearest airport and the helicopter booking offices.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (25 km)",
            "nearest_railway": "Dehradun Railway Station"
        }
    },
    {
        "slug": "rudraprayag",
        "name": "Rudraprayag",
        "type": "transit_town",
        "state": "Uttarakhand",
        "distance_from_delhi": "380 km",
        "distance_from_kedarnath": "86 km",
        "elevation": "895 m",
        "taxi_rates": {"drop_sonprayag_sedan": 2500, "drop_sonprayag_suv": 3200},
        "stay_vibe": "Confluence town, quiet riverside lodges",
        "avg_hotel_price": "₹1,000 - ₹3,500",
        "images": ["/images/cities/rudraprayag.jpg"],
        "description": "Sangam of the Alaknanda and Mandakini where the Kedarnath road branches off.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (160 km)",
            "nearest_railway": "Rishikesh (140 km)"
        }
    },
    {
        "slug": "ukhimath",
        "name": "Ukhimath",
        "type": "temple_town",
        "state": "Uttarakhand",
        "distance_from_delhi": "415 km",
        "distance_from_kedarnath": "57 km",
        "elevation": "1311 m",
        "taxi_rates": {"drop_sonprayag_sedan": 1800, "drop_sonprayag_suv": 2300},
        "stay_vibe": "Winter seat of Kedarnath, calm and spiritual",
        "avg_hotel_price": "₹1,000 - ₹3,000",
        "images": ["/images/cities/ukhimath.jpg"],
        "description": "Omkareshwar temple hosts the Kedarnath deity during the winter months.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (180 km)",
            "nearest_railway": "Rishikesh (180 km)"
        }
    },
    {
        "slug": "guptkashi",
        "name": "Guptkashi",
        "type": "halt",
        "state": "Uttarakhand",
        "distance_from_delhi": "420 km",
        "distance_from_kedarnath": "46 km",
        "elevation": "1319 m",
        "taxi_rates": {"drop_sonprayag_sedan": 1200, "drop_sonprayag_suv": 1600},
        "stay_vibe": "Largest halt with markets and helipads nearby",
        "avg_hotel_price": "₹1,500 - ₹5,000",
        "images": ["/images/cities/guptkashi.jpg"],
        "description": "Main overnight stop with the widest choice of hotels and the Vishwanath temple.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (190 km)",
            "nearest_railway": "Rishikesh (180 km)"
        }
    },
    {
        "slug": "phata",
        "name": "Phata",
        "type": "halt",
        "state": "Uttarakhand",
        "distance_from_delhi": "430 km",
        "distance_from_kedarnath": "32 km",
        "elevation": "1560 m",
        "taxi_rates": {"drop_sonprayag_sedan": 900, "drop_sonprayag_suv": 1200},
        "stay_vibe": "Helicopter base with valley-view homestays",
        "avg_hotel_price": "₹2,000 - ₹6,000",
        "images": ["/images/cities/phata.jpg"],
        "description": "Small village known for its Kedarnath helicopter shuttle pads.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (200 km)",
            "nearest_railway": "Rishikesh (190 km)"
        }
    },
    {
        "slug": "sitapur",
        "name": "Sitapur",
        "type": "halt",
        "state": "Uttarakhand",
        "distance_from_delhi": "440 km",
        "distance_from_kedarnath": "24 km",
        "elevation": "1690 m",
        "taxi_rates": {"drop_sonprayag_sedan": 500, "drop_sonprayag_suv": 700},
        "stay_vibe": "Hotel strip with large parking for yatra buses",
        "avg_hotel_price": "₹2,500 - ₹7,000",
        "images": ["/images/cities/sitapur.jpg"],
        "description": "Cluster of hotels just before Sonprayag, popular with group tours.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (205 km)",
            "nearest_railway": "Rishikesh (195 km)"
        }
    },
    {
        "slug": "sonprayag",
        "name": "Sonprayag",
        "type": "trek_base",
        "state": "Uttarakhand",
        "distance_from_delhi": "445 km",
        "distance_from_kedarnath": "21 km",
        "elevation": "1829 m",
        "taxi_rates": {"drop_sonprayag_sedan": 0, "drop_sonprayag_suv": 0},
        "stay_vibe": "Last motorable point, crowded and functional",
        "avg_hotel_price": "₹3,000 - ₹8,000",
        "images": ["/images/cities/sonprayag.jpg"],
        "description": "Registration checkpoint and shared-jeep stand for Gaurikund.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (210 km)",
            "nearest_railway": "Rishikesh (200 km)"
        }
    },
    {
        "slug": "gaurikund",
        "name": "Gaurikund",
        "type": "trek_base",
        "state": "Uttarakhand",
        "distance_from_delhi": "450 km",
        "distance_from_kedarnath": "16 km",
        "elevation": "1982 m",
        "taxi_rates": {"drop_sonprayag_sedan": 0, "drop_sonprayag_suv": 0},
        "stay_vibe": "Trek start point with hot springs and basic lodges",
        "avg_hotel_price": "₹2,000 - ₹5,000",
        "images": ["/images/cities/gaurikund.jpg"],
        "description": "Where the 16 km walk to the temple begins.",
        "connectivity": {
            "nearest_airport": "Jolly Grant, Dehradun (215 km)",
            "nearest_railway": "Rishikesh (205 km)"
        }
    }
]
