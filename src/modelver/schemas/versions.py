"""Schema version constants for persisted model objects.

Centralizing the target version keeps migrations predictable and avoids
per-module drift when we extend the data model. Bump this string whenever a
converter is added for a new schema revision.
"""

MODEL_VERSION = '{"major":1,"minor":0,"patch":0}'
MODEL_VERSION_FIELD = "modelVersion"
IDENTITY_FIELDS = ("_rev", "_id", "id")
