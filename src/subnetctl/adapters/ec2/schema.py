"""Pydantic models describing the EC2 subnet API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Ec2BaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SubnetPayload(Ec2BaseModel):
    subnet_id: str = Field(alias="SubnetId", min_length=1)
    vpc_id: str | None = Field(default=None, alias="VpcId")
    availability_zone: str | None = Field(default=None, alias="AvailabilityZone")
    cidr_block: str | None = Field(default=None, alias="CidrBlock")
    state: str | None = Field(default=None, alias="State")


class CreateSubnetResponse(Ec2BaseModel):
    subnet: SubnetPayload = Field(alias="Subnet")
