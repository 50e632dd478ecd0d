class World:
    def __init__(self):
        self.entities = set()
        self.components = {}  # component type: {entity: component}
        self.systems = []
        self.next_entity_id = 0

    def add_entity(self):
        entity = self.next_entity_id
        self.next_entity_id += 1
        self.entities.add(entity)
        return entity

    def add_component(self, entity, component):
        # One component per type; adding again replaces it
        self.components.setdefault(type(component), {})[entity] = component

    def get(self, entity, component_type):
        return self.components.get(component_type, {}).get(entity)

    def query(self, *component_types):
        """Yield (entity, component, ...) for entities holding every given type, in id order."""
        for entity in sorted(self.entities):
            found = tuple(self.get(entity, ct) for ct in component_types)
            if all(c is not None for c in found):
                yield (entity,) + found

    def add_system(self, system):
        """Systems run in the order they were added."""
        self.systems.append(system)

    def update(self, dt):
        for system in self.systems:
            system.process(dt)
