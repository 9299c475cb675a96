# Services package.
#
# content_service: one named handler per content operation (create /
#                   list / slug lookup, plus the page update), each a thin
#                   binding of ContentRepository to an entity descriptor.
#
# Every handler takes an EntityStore as its first argument so the router
# layer controls the transaction boundary via the ``get_db`` dependency.
