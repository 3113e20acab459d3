from pydantic import Field
from pydantic_settings import BaseSettings


class ChatCommandSettings(BaseSettings):
    command_prefix: str = Field(default="", description="Prefix a line must start with to be parsed as a command")
    log_level: str = Field(default="INFO", description="Logging level")

    # Command loading
    command_directories: list[str] = Field(
        default=["commands"],
        description="Directories to load command modules from",
    )
    recursive_loading: bool = Field(default=True, description="Also load commands from subdirectories")

    # Messages
    messages_file: str | None = Field(default=None, description="JSON file overriding the default messages")

    # Permissions
    enforce_permissions: bool = Field(default=False, description="Check permission nodes before running commands")
    granted_permissions: list[str] = Field(
        default=["commands.*"],
        description="Permission nodes or wildcard patterns granted to the local user",
    )

    # Development settings
    debug: bool = Field(default=False, description="Log at DEBUG level unless --log-level is given")

    class Config:
        env_prefix = "CHATCMD_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = ChatCommandSettings()
