"""Tests for database initialization."""
import os
import tempfile

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

import blog_platform.blog_service.db as db_module
from blog_platform.blog_service.db import check_db_connection, engine, init_db, reset_db
from blog_platform.blog_service.models import Comment, Post, User


@pytest.fixture
def temp_engine():
    """Point the db module at a fresh temporary SQLite file."""
    with tempfile.NamedTemporaryFile(delete=False, suffix='.db') as tmp:
        tmp_db_path = tmp.name

    test_engine = create_engine(f"sqlite:///{tmp_db_path}", connect_args={"check_same_thread": False})
    original_engine = db_module.engine
    db_module.engine = test_engine
    try:
        yield test_engine
    finally:
        # Restore original engine
        db_module.engine = original_engine
        test_engine.dispose()
        if os.path.exists(tmp_db_path):
            os.unlink(tmp_db_path)


def test_init_db_creates_tables(temp_engine):
    init_db()

    inspector = inspect(temp_engine)
    assert {"users", "posts", "comments"} <= set(inspector.get_table_names())

    user_columns = {col['name']: col for col in inspector.get_columns('users')}
    for col_name in ['id', 'username', 'email', 'password', 'created_at', 'updated_at']:
        assert col_name in user_columns, f"Column {col_name} should exist in users table"
    assert user_columns['email']['nullable'] is False
    assert user_columns['password']['nullable'] is False
    assert user_columns['username']['nullable'] is True


def test_init_db_creates_foreign_keys(temp_engine):
    init_db()

    inspector = inspect(temp_engine)

    post_fks = inspector.get_foreign_keys('posts')
    assert any(fk['referred_table'] == 'users' and fk['constrained_columns'] == ['user_id'] for fk in post_fks)

    comment_fks = {fk['referred_table']: fk['constrained_columns'] for fk in inspector.get_foreign_keys('comments')}
    assert comment_fks['users'] == ['user_id']
    assert comment_fks['posts'] == ['post_id']


def test_email_is_unique(temp_engine):
    init_db()

    inspector = inspect(temp_engine)
    unique_indexes = [idx for idx in inspector.get_indexes('users') if idx['unique']]
    assert any(idx['column_names'] == ['email'] for idx in unique_indexes)


def test_init_db_keeps_existing_rows(temp_engine):
    init_db()
    with temp_engine.begin() as conn:
        conn.execute(text(
            "INSERT INTO users (email, password, created_at, updated_at) "
            "VALUES ('keep@x.com', 'hash', CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)"
        ))

    # A second boot must not wipe data
    init_db()

    with temp_engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM users")).scalar() == 1


def test_reset_db_drops_rows(temp_engine):
    init_db()
    with temp_engine.begin() as conn:
        conn.execute(text(
            "INSERT INTO users (email, password, created_at, updated_at) "
            "VALUES ('gone@x.com', 'hash', CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)"
        ))

    reset_db()

    with temp_engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM users")).scalar() == 0


def test_check_db_connection():
    assert check_db_connection() is True


def test_sqlite_enforces_foreign_keys(db_session):
    db_session.add(Post(title="orphan", content="c", user_id=999))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
    assert db_session.query(Post).count() == 0


def test_deleting_post_row_removes_its_comments(db_session):
    user = User(email="fk@x.com", password="hash")
    db_session.add(user)
    db_session.flush()
    post = Post(title="t", content="c", user_id=user.id)
    db_session.add(post)
    db_session.flush()
    post_id = post.id
    db_session.add(Comment(content="reply", user_id=user.id, post_id=post_id))
    db_session.commit()
    db_session.close()

    # Bypass the ORM cascade so only the database constraint acts
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM posts WHERE id = :id"), {"id": post_id})

    with engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM comments")).scalar() == 0
