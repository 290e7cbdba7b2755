"""
Basic usage example for magicquery.
"""

from datetime import datetime

from magicquery import FilterBuilder, find_first, find_many, group_by


TEAM = [
    {"name": "Alice", "role": "admin", "skills": ["python", "sql"],
     "profile": {"age": 34, "joined": datetime(2021, 3, 1)}},
    {"name": "Bob", "role": "developer", "skills": ["typescript"],
     "profile": {"age": 27, "joined": datetime(2023, 7, 15)}},
    {"name": "Carol", "role": "developer", "skills": ["python", "rust"],
     "profile": {"age": 45, "joined": datetime(2019, 1, 20)}},
    {"name": "Dave", "role": "designer", "skills": [], "profile": None},
]


def main():
    print("=" * 60)
    print("magicquery Basic Usage Example")
    print("=" * 60)
    
    # 1. Simple equality
    print("\n1. Developers:")
    for member in find_many(TEAM, {"where": {"role": "developer"}}):
        print(f"   {member['name']}")
    
    # 2. Operators on nested paths, ordered
    print("\n2. Joined before 2022, oldest first:")
    veterans = find_many(TEAM, {
        "where": {"profile.joined": {"$lt": datetime(2022, 1, 1)}},
        "orderBy": {"profile.age": "desc"},
    })
    for member in veterans:
        print(f"   {member['name']} ({member['profile']['age']})")
    
    # 3. Logical operators
    print("\n3. Python people who are not admins:")
    where = {"skills": {"$contains": "python"}, "$not": {"role": "admin"}}
    for member in find_many(TEAM, {"where": where}):
        print(f"   {member['name']}")
    
    # 4. Builder
    print("\n4. Built filter:")
    where = FilterBuilder().field("profile.age").between(25, 40).build()
    print(f"   {where}")
    print(f"   first match: {find_first(TEAM, {'where': where})['name']}")
    
    # 5. Grouping
    print("\n5. Grouped by role:")
    for group in group_by(TEAM, "role", {"orderBy": {"name": "asc"}}):
        print(f"   {group.name}: {[m['name'] for m in group.items]}")


if __name__ == "__main__":
    main()
