from elemental import Elemental

# Build step by step; freeze once the declaration is complete.
Color = Elemental("Color")
Color.member("blue", display="Hazel Blue", default=True)
Color.member("red", display="Fire Engine Red")
Color.member("yellow")
Color.freeze()

Car = Elemental.declare(
    "Car",
    ("honda", {"position": 100}),
    ("toyota", {"position": 30}),
    ("ford", {"position": 50}),
    ("gm", {"position": 25}),
    ("mazda", {"position": 1}),
)

Fruit = Elemental.declare(
    "Fruit",
    "apple",
    ("pear", {"default": True}),
    ("banana", {"default": True}),
    "kiwi",
    synonyms={"machintosh": "apple"},
)

# Stored as integers, so only ever append new members.
CommentType = Elemental.declare(
    "CommentType",
    ("all", {"display": "Anyone can post"}),
    ("moderated", {"display": "Moderated", "default": True}),
    ("closed", {"display": "Closed to new posts"}),
    persist_ordinally=True,
)


if __name__ == "__main__":
    blue = Color.first()
    print(f"{Color.name}: {[e.name for e in Color]} (default: {[e.name for e in Color.defaults()]})")
    print(f"walking from {blue}: {blue.succ()} -> {blue.succ().succ()} -> {blue.succ().succ().succ()}")

    print(f"{Car.name} by ordinal:  {[e.name for e in Car]}")
    print(f"{Car.name} by position: {[e.name for e in Car.sorted_by_position()]}")

    print(f"machintosh is apple: {Fruit['Machintosh'] is Fruit['apple']}")
    print(f"{CommentType['moderated'].humanize()} is stored as {CommentType['moderated'].value}")
