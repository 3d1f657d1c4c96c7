# attendance_lookup/extensions.py
from flask_cors import CORS

# --- Extensions ---
cors = CORS()
