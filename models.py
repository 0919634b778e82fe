from sqlalchemy import Column, String, Integer, DateTime, func
from sqlalchemy.orm import validates
from database import Base

PASSWORD_MIN_LENGTH = 6


class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, nullable=False, index=True, unique=True)
    fullName = Column(String, nullable=False)
    # bcrypt hash, never the plaintext
    password = Column(String, nullable=False)
    profilePic = Column(String, nullable=False, default="")
    createdAt = Column(DateTime, nullable=False, server_default=func.now())
    updatedAt = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    @validates("password")
    def validate_password(self, key, value):
        if value is None or len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"password must be at least {PASSWORD_MIN_LENGTH} characters")
        return value

    def to_public(self) -> dict:
        return {
            "_id": self.id,
            "fullName": self.fullName,
            "email": self.email,
            "profilePic": self.profilePic,
        }
