# backend/medadherence/db/models/__init__.py

from medadherence.db.models.medication import Medication
from medadherence.db.models.dose_event import DoseEvent
from medadherence.db.models.display_preferences import DisplayPreferences
