"""Core constants: resource paths and hypermedia relation names.

Single source of truth for the user endpoint path and link relations (DRY).
Used by the router aggregation and the outcome router.
"""

# Collection path of the user resource (relative to settings.api_prefix)
USER_ENDPOINT = "/users"

# Hypermedia relation names
SELF_REL = "self"
EDIT_REL = "edit"
INFO_REL = "info"
DELETE_REL = "delete"
NEXT_REL = "next"
PREV_REL = "prev"

# Relation sets attached per response shape
READ_RELS = (SELF_REL, EDIT_REL, DELETE_REL)
EDITED_RELS = (SELF_REL, INFO_REL, DELETE_REL)
