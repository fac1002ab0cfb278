"""
Loco Advisor.

Suggest-only chatbot advisor over a locomotive fleet dashboard snapshot.
Free-text questions are turned into grounded locomotive references and a
recommended read-only dashboard call; nothing is ever executed.
"""

__version__ = "0.1.0"
