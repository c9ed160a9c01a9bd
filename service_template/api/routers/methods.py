"""HTTP method sets shared by router factories."""

# Fixed routes answer every standard request method.
API_ANY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]
