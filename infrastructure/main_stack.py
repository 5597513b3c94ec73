"""
Main CDK Stack for the connectivity status page.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.network import NetworkConstruct
from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class ConnectivityStatusStack(Stack):
    """Main stack wiring all constructs together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        Tags.of(self).add("Project", "connectivity-status")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Network.
        network = NetworkConstruct(
            self,
            "Network",
            environment=settings.environment,
            nat_gateways=settings.nat_gateways,
        )

        # 2) Database + secret.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            vpc=network.vpc,
            subnet_type=network.private_subnet_type,
            security_group=network.db_sg,
            secret_name=settings.secret_name,
            db_name=settings.db_name,
            db_instance_class=settings.db_instance_class,
            db_allocated_storage=settings.db_allocated_storage,
        )

        # 3) Status Lambda + HTTP API.
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            region=self.region,
            vpc=network.vpc,
            subnet_type=network.private_subnet_type,
            security_group=network.lambda_sg,
            secret_name=settings.secret_name,
            dns_hostname=settings.dns_hostname,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        data_construct.db_secret.grant_read(api_construct.main_lambda)

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "DbSecretArn", value=data_construct.db_secret.secret_arn)
        CfnOutput(
            self,
            "DbEndpoint",
            value=data_construct.db_instance.db_instance_endpoint_address,
        )
