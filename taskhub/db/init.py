"""Create tables and load the sample dataset."""
from datetime import datetime
import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from taskhub.models import Comment, Project, Tag, Task, User

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Drop and recreate every table; state never outlives the process."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created")


def seed_sample_data(session: Session) -> None:
    """Insert the fixed sample dataset: 2 users, 3 tags, 1 project, 2 tasks, 1 comment."""
    alice = User(
        id="user-1",
        name="Alice Johnson",
        email="alice@example.com",
        role="admin",
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )
    bob = User(
        id="user-2",
        name="Bob Smith",
        email="bob@example.com",
        role="user",
        created_at=datetime(2024, 1, 2),
        updated_at=datetime(2024, 1, 2),
    )

    frontend = Tag(id="tag-1", name="frontend", color="#3b82f6", created_at=datetime(2024, 1, 1))
    backend = Tag(id="tag-2", name="backend", color="#10b981", created_at=datetime(2024, 1, 1))
    bug = Tag(id="tag-3", name="bug", color="#ef4444", created_at=datetime(2024, 1, 1))

    web_app = Project(
        id="project-1",
        name="Web Application",
        description="Building a modern web application",
        owner_id=alice.id,
        status="active",
        created_at=datetime(2024, 1, 3),
        updated_at=datetime(2024, 1, 3),
    )

    design = Task(
        id="task-1",
        title="Design user interface",
        description="Create mockups for the main dashboard",
        project_id=web_app.id,
        assignee_id=alice.id,
        status="in-progress",
        priority="high",
        due_date=datetime(2024, 2, 1),
        tags=[frontend.id],
        created_at=datetime(2024, 1, 5),
        updated_at=datetime(2024, 1, 10),
    )
    login_bug = Task(
        id="task-2",
        title="Fix login bug",
        description="Users cannot log in with email",
        project_id=web_app.id,
        assignee_id=bob.id,
        status="todo",
        priority="urgent",
        due_date=datetime(2024, 1, 20),
        tags=[backend.id, bug.id],
        created_at=datetime(2024, 1, 8),
        updated_at=datetime(2024, 1, 8),
    )

    comment = Comment(
        id="comment-1",
        task_id=design.id,
        user_id=alice.id,
        content="Working on the design system first",
        created_at=datetime(2024, 1, 6),
        updated_at=datetime(2024, 1, 6),
    )

    session.add_all([alice, bob, frontend, backend, bug, web_app, design, login_bug, comment])
    session.commit()
    logger.info("Sample data loaded")
