from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token
from modaflex.models.user import User, USER_ROLES
from modaflex.repositories.user_repo import UserRepo


class AuthService:
    @staticmethod
    def register(username: str, email: str, password: str, role: str = "attendant"):
        if role not in USER_ROLES:
            raise ValueError("Perfil inválido")
        if UserRepo.get_by_username(username) or UserRepo.get_by_email(email):
            raise ValueError("Usuário ou e-mail já cadastrado")

        user = User(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            role=role
        )
        UserRepo.create(user)
        return user

    @staticmethod
    def login(username: str, password: str):
        user = UserRepo.get_by_username(username)
        if not user or not check_password_hash(user.password_hash, password):
            raise ValueError("Usuário ou senha inválidos")

        token = create_access_token(
            identity=str(user.id),
            additional_claims={"role": user.role, "username": user.username}
        )
        return token, user
