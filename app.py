#!/usr/bin/env python3
import aws_cdk as cdk

from src.gamocracy_stack import GamocracyStack

app = cdk.App()
GamocracyStack(app, "GamocracyStack")

app.synth()
