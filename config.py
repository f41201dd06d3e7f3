import os
import sys
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from dotenv import load_dotenv

load_dotenv()

SITE_BASE_URL        = os.getenv("SITE_BASE_URL", "https://staykedarnath.in").rstrip("/")
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")
CITIES_COLLECTION    = os.getenv("CITIES_COLLECTION", "cities")
LOG_LEVEL            = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Parse fallbacks ──────────────────────────────────────────────
# Unparsable distance loses every "closer" check; unparsable price
# is treated as a typical mid-range hotel rate.
DISTANCE_FALLBACK_KM = int(os.getenv("DISTANCE_FALLBACK_KM", "999"))
PRICE_FALLBACK_INR   = float(os.getenv("PRICE_FALLBACK_INR", "3000"))

# ── Comparison URLs ──────────────────────────────────────────────
COMPARE_SEPARATOR   = "-vs-"
COMPARE_SLUG_SUFFIX = "-stay-for-kedarnath"

# ── Firebase initialization (runs once, only with credentials) ──
db = None
if FIREBASE_CREDENTIALS and os.path.isfile(FIREBASE_CREDENTIALS):
    if not firebase_admin._apps:
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
        firebase_admin.initialize_app(cred)
    db = firestore.client()


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
