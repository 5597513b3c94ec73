"""
Environment-specific configuration settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "us-west-1"

    # Runtime wiring
    secret_name: str = "rds-db-credentials"
    dns_hostname: str = "google.com"

    # Database Configuration (Cost-optimized)
    db_instance_class: str = "t3.micro"  # Free tier eligible
    db_allocated_storage: int = 20  # Minimum GB
    db_name: str = "status"

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 15

    # NAT gives the private subnets internet egress. The DNS probe only
    # shows the VPC resolver answers public names, so it passes either way.
    nat_gateways: int = 0

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("REGION", cls.aws_region)
        secret_name = os.environ.get("SECRET_NAME", cls.secret_name)

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                secret_name=secret_name,
                db_instance_class="t3.small",  # Upgrade for prod
                db_allocated_storage=50,
                lambda_memory_mb=512,
                lambda_timeout_seconds=30,
                nat_gateways=1,
            )

        return cls(environment=env, aws_region=region, secret_name=secret_name)
