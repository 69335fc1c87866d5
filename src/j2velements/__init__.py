"""j2velements — element normalization for JSON2Video-style movie requests.

Normalize loosely-typed, UI-authored element descriptions (camelCase fields
grouped into settings objects) into flat kebab-case API elements, and check
that each element is placed at a level (movie or scene) where it is allowed.
Movies are declared in YAML manifests.
"""
