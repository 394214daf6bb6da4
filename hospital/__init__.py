"""
Hospital Management Service
===========================

Patients, doctors, appointments and examinations organised in
domain / application / infrastructure / api layers.
"""
