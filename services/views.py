"""
View Models

Plain data handed to the renderer. `to_dict()` produces the JSON shape
the renderer consumes.
"""

from dataclasses import dataclass, field


@dataclass
class MenuItem:
    id: int
    description: str

    @classmethod
    def from_collection(cls, collection):
        return cls(id=collection.id, description=collection.description)

    def to_dict(self):
        return {'id': self.id, 'description': self.description}


@dataclass
class MenuList:
    items: list = field(default_factory=list)

    def to_dict(self):
        return {'kind': 'menu', 'items': [item.to_dict() for item in self.items]}


@dataclass
class SuggestionMessage:
    """Two options for the user to choose from."""
    option_a: MenuItem
    option_b: MenuItem

    def to_dict(self):
        return {
            'kind': 'suggestion',
            'optionA': self.option_a.to_dict(),
            'optionB': self.option_b.to_dict(),
        }


@dataclass
class StatusMessage:
    """A recoverable condition shown instead of content."""
    kind: str
    text: str

    def to_dict(self):
        return {'kind': 'status', 'status': self.kind, 'text': self.text}


@dataclass
class RecipeDetail:
    title: str
    ingredient_lines: list
    resolved_method_text: str

    def to_dict(self):
        return {
            'title': self.title,
            'ingredientLines': [line.to_dict() for line in self.ingredient_lines],
            'resolvedMethodText': self.resolved_method_text,
        }
