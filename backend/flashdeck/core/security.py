from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def _safe(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    if not isinstance(password, str):
        password = str(password)
    return password.encode("utf-8")[:72].decode("utf-8", errors="ignore")


def hash_password(password: str) -> str:
    return pwd_context.hash(_safe(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_safe(plain_password), hashed_password)
