"""Fixed, human-readable messages returned to API clients."""

USER_NOT_FOUND = "User not found."
BLOG_NOT_FOUND = "Blog post not found"
BLOG_UPDATE_NOT_FOUND = "Blog post not found."
BLOG_DELETE_NOT_FOUND = "Blog post with this id does not exist."
BLOG_FETCHED_SUCCESSFUL = "Blog fetched successfully"
NO_SEARCH_RESULTS = "No results found for the provided search criteria"
AUTHOR_NOT_FOUND = "Author not found"
UNKNOWN_AUTHOR = "Unknown"
MISSING_REQUESTING_USER = "Authentication required."
DUPLICATE_USER = "A user with this email already exists"
