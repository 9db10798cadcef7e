"""Advent of DevOps content layer.

Layout read by the store:
    content/advent-of-devops/
    ├── index.md          # Overview page (slug "advent-of-devops")
    ├── day-1.md          # One file per day, YAML frontmatter + markdown
    ├── ...
    └── day-25.md
"""
