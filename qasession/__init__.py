"""
Q&A session dashboards: submit, vote on and moderate questions kept in a shared table
"""
