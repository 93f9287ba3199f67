# Subpackages are imported explicitly, e.g. `from projecthub.core.db.models import Base`.
