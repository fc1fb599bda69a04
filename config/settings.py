import os
from dotenv import load_dotenv

load_dotenv()

INSTAGRAM_CLIENT_ID = os.getenv("INSTAGRAM_CLIENT_ID")
INSTAGRAM_CLIENT_SECRET = os.getenv("INSTAGRAM_CLIENT_SECRET")
INSTAGRAM_REDIRECT_URI = os.getenv("INSTAGRAM_REDIRECT_URI")

def validate_keys(raise_on_missing: bool = False):
	missing = []
	if not INSTAGRAM_CLIENT_ID:
		missing.append('INSTAGRAM_CLIENT_ID')
	if not INSTAGRAM_CLIENT_SECRET:
		missing.append('INSTAGRAM_CLIENT_SECRET')
	if not INSTAGRAM_REDIRECT_URI:
		missing.append('INSTAGRAM_REDIRECT_URI')
	if missing and raise_on_missing:
		raise EnvironmentError(f"Missing required env vars: {', '.join(missing)}")
	return missing
