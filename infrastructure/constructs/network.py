"""
Network construct: VPC shared by the database and the status Lambda.

- No NAT in dev to save cost. The VPC resolver still answers public
  names, so the DNS probe succeeds without egress.
- Secrets Manager interface endpoint so the Lambda can read credentials
  from private subnets without NAT.
"""

from aws_cdk import aws_ec2 as ec2
from constructs import Construct


class NetworkConstruct(Construct):
    """Provision the VPC and the security groups linking Lambda to RDS."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        nat_gateways: int = 0,
    ) -> None:
        super().__init__(scope, construct_id)

        private_type = (
            ec2.SubnetType.PRIVATE_WITH_EGRESS
            if nat_gateways > 0
            else ec2.SubnetType.PRIVATE_ISOLATED
        )
        self.private_subnet_type = private_type

        self.vpc = ec2.Vpc(
            self,
            "Vpc",
            max_azs=2,
            nat_gateways=nat_gateways,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="Public",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    cidr_mask=24,
                ),
                ec2.SubnetConfiguration(
                    name="Private",
                    subnet_type=private_type,
                    cidr_mask=24,
                ),
            ],
        )

        self.vpc.add_interface_endpoint(
            "SecretsManagerEndpoint",
            service=ec2.InterfaceVpcEndpointAwsService.SECRETS_MANAGER,
        )

        self.lambda_sg = ec2.SecurityGroup(
            self,
            "LambdaSg",
            vpc=self.vpc,
            description=f"Status Lambda ({environment})",
            allow_all_outbound=True,
        )
        self.db_sg = ec2.SecurityGroup(
            self,
            "DbSg",
            vpc=self.vpc,
            description=f"Status database ({environment})",
            allow_all_outbound=False,
        )
        self.db_sg.add_ingress_rule(
            self.lambda_sg,
            ec2.Port.tcp(5432),
            "Postgres from the status Lambda",
        )
