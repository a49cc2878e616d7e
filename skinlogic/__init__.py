"""
SkinLogic
Skin-condition tracking and coaching engine.

Subpackages:
- engine:   questionnaire -> ComputedProfile (scoring, protocol, roadmap)
- tracking: daily logs, symptom trend, dashboard summary
- mindset:  persona quiz and 7-day mindset programs
- profile:  record store protocol and onboarding/check-in flows
- shared:   hashing, disclaimers, text helpers
"""

__version__ = "1.0.0"
