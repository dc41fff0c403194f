"""
Comandos de manutenção.

    python -m clubsite.manage init-db
    python -m clubsite.manage promote admin@club.com
    python -m clubsite.manage promote someone@club.com --role user
"""
import argparse
import logging
import sys

from sqlalchemy import select

from clubsite.core.database import SessionLocal, init_db_sync
from clubsite.core.logging_config import setup_logging
from clubsite.core.security import Role
from clubsite.models.user import User

logger = logging.getLogger(__name__)


def set_role(email: str, role: Role) -> bool:
    """Altera o papel de um usuário; False se o email não existir"""
    with SessionLocal() as db:
        user = db.execute(
            select(User).filter(User.email == email.strip().lower())
        ).scalar_one_or_none()
        if user is None:
            return False
        user.role = role.value
        db.commit()
    logger.info(f"Papel de {email} alterado para {role.value}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clubsite.manage")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Cria as tabelas")

    promote = subparsers.add_parser("promote", help="Altera o papel de um usuário")
    promote.add_argument("email")
    promote.add_argument("--role", choices=[r.value for r in Role], default=Role.ADMIN.value)

    return parser


def main(argv=None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    if args.command == "init-db":
        init_db_sync()
        print("✅ Tabelas criadas")
        return 0

    if args.command == "promote":
        if not set_role(args.email, Role(args.role)):
            print(f"❌ Usuário {args.email} não encontrado")
            return 1
        print(f"✅ {args.email} agora é {args.role}")
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
