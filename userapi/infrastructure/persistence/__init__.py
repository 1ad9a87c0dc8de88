"""SQLAlchemy persistence: engine/session lifecycle, ORM models, repositories."""
