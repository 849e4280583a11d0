"""Shared fixtures for the Technical Referee tests."""

import pytest

from technical_referee.schema import Category, TechnicalOption


@pytest.fixture
def aws() -> TechnicalOption:
    """AWS on reserved pricing, without enterprise feature or certification lists."""
    return TechnicalOption(name="AWS", category=Category.CLOUD, attributes={
        "pricingModel": "reserved",
        "serviceCount": 200,
        "learningCurve": "high",
        "marketShare": 32,
        "regions": 25,
    })


@pytest.fixture
def digitalocean() -> TechnicalOption:
    return TechnicalOption(name="DigitalOcean", category=Category.CLOUD, attributes={
        "pricingModel": "pay-as-you-go",
        "serviceCount": 50,
        "learningCurve": "low",
        "marketShare": 3,
        "regions": 8,
    })


@pytest.fixture
def startup_constraints() -> dict:
    """Small team, tight budget, shipping now."""
    return {
        "budget": "low",
        "scale": {"users": 100, "traffic": "low"},
        "team": {"skillLevel": "junior", "experience": []},
        "timeline": "immediate",
        "priorities": {
            "cost": 5,
            "performance": 1,
            "easeOfUse": 5,
            "scalability": 1,
            "vendorLockIn": 1,
        },
    }


@pytest.fixture
def enterprise_constraints() -> dict:
    """Senior team with AWS experience, big budget, heavy traffic."""
    return {
        "budget": "high",
        "scale": {"users": 100000, "traffic": "high"},
        "team": {"skillLevel": "senior", "experience": ["AWS"]},
        "timeline": "long",
        "priorities": {
            "cost": 1,
            "performance": 5,
            "easeOfUse": 1,
            "scalability": 5,
            "vendorLockIn": 1,
        },
    }
