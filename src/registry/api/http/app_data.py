from dataclasses import dataclass

from src.registry.core.security import PasswordCipher
from src.registry.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)
from src.registry.entities import InstituteRepository, UserRepository


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_generation_service: JwtGeneratorService
    jwt_verify_service: JwtVerificationService
    password_cipher: PasswordCipher
    user_repository: UserRepository
    institute_repository: InstituteRepository

    @classmethod
    def build(cls, database_service: DbSessionService) -> "ApplicationDependencies":
        """Wire the services and repositories around one database service."""
        return cls(
            database_service=database_service,
            jwt_generation_service=JwtGeneratorService(),
            jwt_verify_service=JwtVerificationService(),
            password_cipher=PasswordCipher(),
            user_repository=UserRepository(database_service),
            institute_repository=InstituteRepository(database_service),
        )
