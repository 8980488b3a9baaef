from passlib.context import CryptContext
from utils.logger import get_logger
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

logger = get_logger("HASH_UTILS")

def _truncate(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    password_bytes = str(password).encode("utf-8")[:72]
    return password_bytes.decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
    logger.info("Password received for hashing")
    return pwd_context.hash(_truncate(password))

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(_truncate(plain_password), hashed_password)
    except ValueError:
        # malformed or unknown hash format in the credential document
        logger.error("Stored admin password hash could not be parsed")
        return False
