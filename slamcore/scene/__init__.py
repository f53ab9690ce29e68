"""Entity-component world, scene components, camera and YAML scene files."""