import argparse
import logging

from dashboard.auth import hash_password
from dashboard.db.engine import get_engine
from dashboard.db.schema import metadata, users
from dashboard.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_user(engine, name: str, email: str, password: str) -> None:
    with engine.begin() as conn:
        conn.execute(
            users.insert().values(
                name=name,
                email=email,
                password=hash_password(password),
            )
        )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the dashboard schema.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    parser.add_argument("--user-email", help="seed a login user with this email")
    parser.add_argument("--user-name", default="User")
    parser.add_argument("--user-password", help="password for the seeded user")
    args = parser.parse_args(argv)
    setup_logging()

    if args.user_email and not args.user_password:
        parser.error("--user-password is required with --user-email")

    engine = get_engine()
    if args.drop:
        metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created.")

    if args.user_email:
        create_user(engine, args.user_name, args.user_email, args.user_password)
        logger.info("Seeded user %s", args.user_email)


if __name__ == "__main__":
    main()
