"""Run the blog server with ``python -m blog``."""

from blog.web.main import main

main()
