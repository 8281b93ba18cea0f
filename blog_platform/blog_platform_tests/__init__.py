"""
blog_platform_tests package

Tests for the blog service:

- registration, login and logout (`test_users.py`)
- posts and comments, including ownership checks (`test_posts.py`, `test_comments.py`)
- password and token helpers (`test_auth_helpers.py`)
- database setup and health endpoints (`test_db_init.py`, `test_health.py`)
- activity logging (`test_event_logger.py`)
"""
