"""Implements a PropertySet class, a dictionary-like bag of named parameters with `.name` access."""

import json
from pathlib import Path


class PropertySet:
    """A bag of parameters with both ``ps["name"]`` and ``ps.name`` access.

    Examples
    --------
    Defaults for reading an observations file:
        >>> from kaplanmeier import PropertySet
        >>> params = PropertySet({"delimiter": ",", "time_column": 0, "event_column": 1})
        >>> print(params.delimiter)       # Outputs: ','
        >>> print(params["time_column"])  # Outputs: 0

    Overriding existing values (keys *must* already exist):
        >>> params <<= {"delimiter": "\\t"}
        >>> params <<= {"sheet": 2}       # raises ValueError, 'sheet' is not a known parameter

    Loading overrides from JSON:
        >>> params <<= PropertySet.load("params.json")
    """

    def __init__(self, *bags):
        """
        Initialize a PropertySet from zero or more dictionaries or PropertySets, later bags win.

        Parameters
        ----------
        *bags : dict or PropertySet, optional
            Sources of key-value pairs. Keys must be strings.
        """

        for bag in bags:
            assert isinstance(bag, (type(self), dict)), f"Expected dict or PropertySet, got {type(bag)}"
            for key, value in _items(bag):
                setattr(self, key, value)

    def to_dict(self):
        """Convert the PropertySet, including nested PropertySets, to a plain dictionary."""
        return {key: value.to_dict() if isinstance(value, PropertySet) else value for key, value in self.__dict__.items()}

    def __getitem__(self, key):
        """Return the value for ``key`` (e.g., ``ps[key]``), raising AttributeError if it is missing."""
        return getattr(self, key)

    def __setitem__(self, key, value):
        setattr(self, key, value)

    def __ilshift__(self, other):
        """
        Implements ``<<=`` to override existing values.

        Parameters:

            other (Union[PropertySet, dict]): The overriding values.

        Returns:

            self: The updated instance.

        Raises:

            ValueError: If `other` contains a key not already present in this PropertySet.
        """

        assert isinstance(other, (type(self), dict)), f"Expected dict or PropertySet, got {type(other)}"
        for key, value in _items(other):
            if not hasattr(self, key):
                raise ValueError(f"Cannot override missing key '{key}'.")
            setattr(self, key, value)
        return self

    def __len__(self):
        return len(self.__dict__)

    def __contains__(self, key):
        return key in self.__dict__

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=4)

    def __repr__(self) -> str:
        return f"PropertySet({self.to_dict()!s})"

    @staticmethod
    def load(filename):
        """
        Load a PropertySet from a JSON file containing a single object.

        Parameters:

            filename (str or Path): The file to read.

        Returns:

            PropertySet: The loaded parameters.
        """
        with Path(filename).open("r") as file:
            data = json.load(file)

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in '{filename}', got {type(data).__name__}.")

        return PropertySet(data)


def _items(bag):
    return (bag.__dict__ if isinstance(bag, PropertySet) else bag).items()
