# Services package.
#
#   blog_service  — BlogService: CRUD + search for Blog, with author names
#   user_service  — create / fetch for User
#
# Services work through the repositories in ``app.repositories`` and
# flush but never commit, so the router layer controls the transaction
# boundary via the ``get_db`` dependency.
