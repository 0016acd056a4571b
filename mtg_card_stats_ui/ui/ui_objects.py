# mtg_card_stats_ui/ui/ui_objects.py

from typing import Dict, Optional, List, Union, Callable
import gradio as gr
from abc import ABC, abstractmethod


class UIBase(ABC):
    @abstractmethod
    def get_components(self) -> Dict[str, gr.components.Component]:
        """
        Return a dictionary of all components in this UI object.
        Should be overridden by subclasses.
        """
        raise NotImplementedError

    def get_component_map(self) -> Dict[str, gr.components.Component]:
        """
        Alias for get_components for compatibility.
        """
        return self.get_components()

    @abstractmethod
    def render(self):
        """
        Renders the component in the current Gradio Blocks context.
        """
        raise NotImplementedError


class UIElement(UIBase):
    """
    Represents a single Gradio component with a name for unified state management.
    Uses a factory to create the component inside the correct Gradio context.
    """

    def __init__(
        self, name: str, component_factory: Callable[[], gr.components.Component]
    ):
        self.name = name
        self._component_factory = component_factory
        self._component = None

    def get_component(self) -> gr.components.Component:
        return self._component

    def get_name(self) -> str:
        return self.name

    def render(self):
        """
        Render the Gradio component inside the current context.
        """
        self._component = self._component_factory()

    def get_components(self) -> Dict[str, gr.components.Component]:
        """
        Return a dictionary of all components in this element.
        Components that have not been rendered yet are left out.
        """
        if self._component is None:
            return {}
        return {self.get_name(): self._component}


class UIContainer(UIBase):
    """
    Wraps multiple UIElements or nested UIContainers with layout instructions.
    """

    def __init__(
        self,
        layout_type: str,
        children: Optional[List[Union["UIElement", "UIContainer"]]] = None,
    ):
        self.layout_type = layout_type
        self.children = children or []

    def render(self):
        """Render the container and its children."""
        if self.layout_type == "row":
            with gr.Row():
                for child in self.children:
                    child.render()
        else:
            raise ValueError(f"Unsupported layout type: {self.layout_type}")

    def get_components(self) -> Dict[str, gr.components.Component]:
        """
        Return a dictionary of all components in this container.
        """
        components = {}
        for child in self.children:
            components.update(child.get_components())
        return components


class UISection(UIBase):
    """
    Represents a logical section of the UI, grouping multiple UIElements.
    """

    def __init__(self, name: str, label: Optional[str] = None, show_label: bool = True):
        self.name = name
        self.label = label or name
        self.show_label = show_label
        self.elements: Dict[str, UIElement] = {}
        self.layout: Optional[UIContainer] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        pass

    def add_element(self, element: UIElement):
        self.elements[element.get_name()] = element

    def get_element(self, name: str) -> Optional[UIElement]:
        return self.elements.get(name)

    def get_components(self) -> Dict[str, gr.components.Component]:
        """
        Return a dictionary of all components in this section.
        """
        components = {}
        if self.layout:
            components.update(self.layout.get_components())

        for element in self.elements.values():
            components.update(element.get_components())

        return components

    def set_layout(self, layout: UIContainer):
        """
        Define the layout for this section.
        """
        self.layout = layout

    def render(self):
        """
        Render the section heading and all of its components.
        """
        with gr.Group(elem_id=f"{self.name}_section"):
            if self.show_label:
                gr.Markdown(f"### {self.label}")
            if self.layout:
                self.layout.render()
            else:
                for element in self.elements.values():
                    element.render()


class UITab(UIBase):
    """
    Represents a Gradio tab composed of multiple UISections.
    """

    def __init__(self, tab_name: str):
        self.tab_name = tab_name
        self.sections: Dict[str, UISection] = {}

    def add_section(self, section: UISection):
        self.sections[section.name] = section

    def get_element(self, name: str) -> Optional[UIElement]:
        for section in self.sections.values():
            if name in section.elements:
                return section.elements[name]
        return None

    def get_components(self) -> Dict[str, gr.components.Component]:
        """
        Flatten all components from all sections for easy wiring.
        """
        components = {}
        for section in self.sections.values():
            components.update(section.get_components())
        return components

    def render(self):
        for section in self.sections.values():
            section.render()
