"""Boilerplate generation for Velo classes, state classes, tests and widget wrappers.

Every generator is a pure function of its arguments so repeated calls with
the same input produce identical text.
"""

from enum import Enum

from velo_assist.models import PropertyDescriptor
from velo_assist.naming import snake_to_class_name, to_snake_case

LISTENER_PLACEHOLDER = "// TODO: Add your listener logic here"

_METHOD_EXAMPLES = """  // TODO: Add your methods here
  // Example:
  // void increment() {
  //   emit(state.copyWith(count: state.count + 1));
  // }

  // Example async method:
  // Future<void> loadData() async {
  //   emit(state.copyWith(isLoading: true));
  //   try {
  //     // Your async logic here
  //     final data = await fetchData();
  //     emit(state.copyWith(data: data, isLoading: false));
  //   } catch (error) {
  //     emit(state.copyWith(error: error.toString(), isLoading: false));
  //   }
  // }"""


class WrapKind(str, Enum):
    """Velo widgets a selected expression can be wrapped in."""
    BUILDER = "builder"
    LISTENER = "listener"
    CONSUMER = "consumer"


def derive_state_name(class_name: str) -> str:
    """Derive the state class name belonging to a Velo class name.

    A trailing "Notifier" becomes "State"; otherwise the first "Velo" is
    replaced by "State".

    Examples:
        >>> derive_state_name("CounterNotifier")
        'CounterState'
        >>> derive_state_name("CounterVelo")
        'CounterState'
    """
    if class_name.endswith("Notifier"):
        return class_name[: -len("Notifier")] + "State"
    return class_name.replace("Velo", "State", 1)


def _nullable(type_name: str) -> str:
    return type_name if type_name.endswith("?") else f"{type_name}?"


def generate_state_class(class_name: str, properties: list[PropertyDescriptor]) -> str:
    """Generate an Equatable state class with fields, props and copyWith.

    Properties with a default value become optional constructor parameters,
    the others are required. With no properties, TODO comments stand in
    for fields, props and copyWith.

    Args:
        class_name: Name of the state class (e.g. "CounterState")
        properties: Fields in declaration order

    Returns:
        Dart source for the state class file
    """
    if properties:
        constructor_params = ",\n    ".join(
            f"this.{p.name} = {p.default_value}" if p.default_value else f"required this.{p.name}"
            for p in properties
        )
        constructor = f"const {class_name}({{\n    {constructor_params},\n  }});"
        fields = "\n".join(f"  final {p.type} {p.name};" for p in properties)
        props = ", ".join(p.name for p in properties)
        copy_with_params = ",\n    ".join(f"{_nullable(p.type)} {p.name}" for p in properties)
        copy_with_body = ",\n".join(f"      {p.name}: {p.name} ?? this.{p.name}" for p in properties)
    else:
        constructor = f"const {class_name}({{}});"
        fields = "  // TODO: Add your properties here"
        props = "\n    // TODO: Add your properties here\n  "
        copy_with_params = "// TODO: Add your copyWith parameters here"
        copy_with_body = "      // TODO: Add your copyWith logic here"

    return f"""import 'package:equatable/equatable.dart';

class {class_name} extends Equatable {{
  {constructor}

{fields}

  @override
  List<Object?> get props => [{props}];

  {class_name} copyWith({{
    {copy_with_params}
  }}) {{
    return {class_name}(
{copy_with_body}
    );
  }}
}}
"""


def generate_velo_class(
    class_name: str,
    state_import: str | None = None,
    state_name: str | None = None,
) -> str:
    """Generate a Velo class extending Velo<State>.

    Args:
        class_name: Name of the Velo class
        state_import: Import path of the state class file. When omitted a
            commented-out placeholder import is emitted instead.
        state_name: State class name; derived from class_name if omitted

    Returns:
        Dart source for the Velo class file
    """
    if state_name is None:
        state_name = derive_state_name(class_name)

    if state_import is not None:
        imports = f"import 'package:velo/velo.dart';\nimport '{state_import}';"
    else:
        imports = (
            "import 'package:equatable/equatable.dart';\n"
            "import 'package:velo/velo.dart';\n"
            "\n"
            "// TODO: Import your state class\n"
            f"// import '{to_snake_case(state_name)}.dart';"
        )

    return f"""{imports}

class {class_name} extends Velo<{state_name}> {{
  {class_name}() : super(const {state_name}());

{_METHOD_EXAMPLES}
}}
"""


def generate_test_file(test_name: str) -> str:
    """Generate a velo_test scaffold for a snake_case test name.

    The test bodies are commented guidance, not executable assertions.
    """
    class_name = snake_to_class_name(test_name)

    return f"""import 'package:flutter_test/flutter_test.dart';
import 'package:velo_test/velo_test.dart';

// TODO: Import your classes
// import '../lib/{test_name}.dart';

void main() {{
  group('{class_name}', () {{
    late {class_name} velo;

    setUp(() {{
      velo = {class_name}();
    }});

    tearDown(() {{
      velo.dispose();
    }});

    test('initial state is correct', () {{
      // TODO: Add your initial state test
      // expect(velo.state, equals(const InitialState()));
    }});

    test('method name changes state correctly', () {{
      // TODO: Add your method tests
      // velo.methodName();
      // expect(velo.state, equals(const ExpectedState()));
    }});

    // Example using velo_test matchers
    test('emits correct states', () {{
      // TODO: Add state emission tests
      // expectLater(
      //   velo.stream,
      //   emitsInOrder([
      //     const InitialState(),
      //     const LoadingState(),
      //     const LoadedState(data: expectedData),
      //   ]),
      // );
      // velo.loadData();
    }});
  }});
}}
"""


def generate_velo_builder(selected_text: str, velo_type: str, state_type: str) -> str:
    return f"""VeloBuilder<{velo_type}, {state_type}>(
  builder: (context, state) {{
    return {selected_text};
  }},
)"""


def generate_velo_listener(selected_text: str, velo_type: str, state_type: str) -> str:
    return f"""VeloListener<{velo_type}, {state_type}>(
  listener: (context, state) {{
    {LISTENER_PLACEHOLDER}
  }},
  child: {selected_text},
)"""


def generate_velo_consumer(selected_text: str, velo_type: str, state_type: str) -> str:
    return f"""VeloConsumer<{velo_type}, {state_type}>(
  listener: (context, state) {{
    {LISTENER_PLACEHOLDER}
  }},
  builder: (context, state) {{
    return {selected_text};
  }},
)"""


_WRAPPERS = {
    WrapKind.BUILDER: generate_velo_builder,
    WrapKind.LISTENER: generate_velo_listener,
    WrapKind.CONSUMER: generate_velo_consumer,
}


def generate_wrap_expression(
    kind: WrapKind | str,
    selected_text: str,
    velo_type: str,
    state_type: str,
) -> str:
    """Wrap an expression in a VeloBuilder, VeloListener or VeloConsumer.

    Raises:
        ValueError: If kind is not one of the WrapKind values
    """
    return _WRAPPERS[WrapKind(kind)](selected_text, velo_type, state_type)


def generate_provider(selected_text: str, velo_type: str) -> str:
    """Wrap an expression in a Provider that creates and disposes velo_type."""
    return f"""Provider<{velo_type}>(
  create: (_) => {velo_type}(),
  dispose: (_, velo) => velo.dispose(),
  child: {selected_text},
)"""
