"""
Services Layer

round_pairing and maplist are pure: no session, no I/O, randomness only.
ladder_days and ladder_generation work on a database session and never
depend on HTTP request/response objects.
"""
